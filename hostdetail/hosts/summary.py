from hostdetail.config import (
    SCORE_TIERS,
    UPTIME_TIERS,
    LOWEST_TIER,
    MIN_PRICE_BAR_HEIGHT,
    PUBLIC_KEY_DISPLAY_LENGTH,
)


def _tier(value, tiers):
    for lower_bound, name in tiers:
        if value >= lower_bound:
            return name
    return LOWEST_TIER


def score_tier(score: float) -> str:
    return _tier(score, SCORE_TIERS)


def uptime_tier(uptime: float) -> str:
    return _tier(uptime, UPTIME_TIERS)


def storage_utilization(used_storage: float, total_storage: float) -> float:
    """
    Used storage as a percentage of total. Not clamped: a host reporting
    more used than total storage shows above 100.
    """
    if total_storage == 0:
        return 0.0
    return used_storage / total_storage * 100


def price_trend(history) -> dict:
    first, last = history[0], history[-1]
    change = (last - first) / first * 100 if first else 0.0
    return {
        "change_percent": change,
        "direction": "up" if last > first else "down",
    }


def price_bar_heights(history) -> list:
    """
    Scale each price into a 0-100 bar height relative to the series range.
    """
    low = min(history)
    spread = (max(history) - low) or 1
    return [max((price - low) / spread * 100, MIN_PRICE_BAR_HEIGHT) for price in history]


def map_position(lat: float, lng: float) -> dict:
    # equirectangular, percentages from the top-left corner
    return {
        "left": (lng + 180) / 360 * 100,
        "top": (90 - lat) / 180 * 100,
    }


def short_public_key(public_key: str, length: int = PUBLIC_KEY_DISPLAY_LENGTH) -> str:
    return public_key[:length] + "..."


def summarize(record) -> dict:
    """
    Derived display metrics for a host record.
    """
    return {
        "storage_utilization": storage_utilization(record.used_storage, record.total_storage),
        "score_tier": score_tier(record.host_score),
        "uptime_tier": uptime_tier(record.uptime),
        "price_trend": price_trend(record.price_history),
        "price_bars": price_bar_heights(record.price_history),
        "uptime_bars": [
            {"day": day, "uptime": uptime, "tier": uptime_tier(uptime)}
            for day, uptime in enumerate(record.uptime_history, start=1)
        ],
        "map_position": map_position(record.lat, record.lng),
        "short_public_key": short_public_key(record.public_key),
    }
