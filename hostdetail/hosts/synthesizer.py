import math

from hostdetail.hosts.host_record import HostRecord
from hostdetail.util.clock import utc_now
from hostdetail.util.seed import seed_from_identifier, seeded_rand
from hostdetail.config import (
    DAY,
    HOUR,
    REGION_ORDER,
    REGION_ANCHORS,
    LOCATION_JITTER,
    HOST_PORT,
    PUBLIC_KEY_ALGORITHM,
    PUBLIC_KEY_HEX_LENGTH,
    SOFTWARE_NAME,
    OFFLINE_THRESHOLD,
    NOT_ACCEPTING_THRESHOLD,
    FIRST_SEEN_DAYS,
    LAST_ANNOUNCED_HOURS,
    HOST_RANGES,
    HISTORY_DAYS,
    UPTIME_HISTORY_FLOOR,
    UPTIME_HISTORY_STEP,
    UPTIME_HISTORY_CEILING,
    PRICE_WAVE_PERIOD,
    PRICE_WAVE_AMPLITUDE,
)

HEX_DIGITS = "0123456789abcdef"


def region_for_seed(seed: int) -> str:
    return REGION_ORDER[seed % len(REGION_ORDER)]


def synthesize(host_id: str, clock=utc_now) -> HostRecord:
    """
    Derive a complete host profile from the identifier.

    Everything except first_seen/last_announced depends only on host_id;
    those two are offsets back from clock().
    """
    seed = seed_from_identifier(host_id)
    rand = seeded_rand(seed)

    def ranged(name):
        return rand(*HOST_RANGES[name])

    def whole(low, high):
        return math.floor(rand(low, high))

    now = clock()
    anchor = REGION_ANCHORS[region_for_seed(seed)]

    octets = ".".join(str(whole(1, 255)) for _ in range(4))
    key_digits = "".join(
        HEX_DIGITS[math.floor(rand(0, 16) + i) % 16]
        for i in range(PUBLIC_KEY_HEX_LENGTH)
    )

    return HostRecord(
        id=host_id,
        address=f"{octets}:{HOST_PORT}",
        public_key=f"{PUBLIC_KEY_ALGORITHM}:{key_digits}",
        online=rand(0, 1) > OFFLINE_THRESHOLD,
        accepting_contracts=rand(0, 1) > NOT_ACCEPTING_THRESHOLD,
        first_seen=now - rand(*FIRST_SEEN_DAYS) * DAY,
        last_announced=now - rand(*LAST_ANNOUNCED_HOURS) * HOUR,
        country=anchor["country"],
        lat=anchor["lat"] + rand(*LOCATION_JITTER),
        lng=anchor["lng"] + rand(*LOCATION_JITTER),
        software_version=f"{SOFTWARE_NAME} v{whole(1, 2)}.{whole(0, 9)}.{whole(0, 9)}",
        protocol_version=f"{whole(1, 3)}.{whole(0, 5)}.0",
        total_storage=ranged("total_storage"),
        used_storage=ranged("used_storage"),
        storage_price=ranged("storage_price"),
        ingress_price=ranged("ingress_price"),
        egress_price=ranged("egress_price"),
        contract_price=ranged("contract_price"),
        sector_access_price=ranged("sector_access_price"),
        collateral=ranged("collateral"),
        max_collateral=ranged("max_collateral"),
        upload_speed=math.floor(ranged("upload_speed")),
        download_speed=math.floor(ranged("download_speed")),
        uptime=ranged("uptime"),
        reliability=ranged("reliability"),
        contracts=math.floor(ranged("contracts")),
        success_rate=ranged("success_rate"),
        host_score=ranged("host_score"),
        uptime_history=uptime_history(rand),
        price_history=price_history(rand),
    )


def uptime_history(rand):
    """
    Daily uptime, oldest first. The lower bound rises with the day index.
    """
    return tuple(
        rand(UPTIME_HISTORY_FLOOR + i * UPTIME_HISTORY_STEP, UPTIME_HISTORY_CEILING)
        for i in range(HISTORY_DAYS)
    )


def price_history(rand):
    """
    Daily storage price, oldest first: a fixed base plus a slow sine wave.
    """
    low, high = HOST_RANGES["storage_price"]
    return tuple(
        rand(low, high) + math.sin(i / PRICE_WAVE_PERIOD) * PRICE_WAVE_AMPLITUDE
        for i in range(HISTORY_DAYS)
    )
