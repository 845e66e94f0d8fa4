import datetime

DAY = datetime.timedelta(days=1)
HOUR = datetime.timedelta(hours=1)

# HTTP defaults
API_PORT = 5000
HOST_CACHE_SECONDS = 60  # 0 disables memoisation of host records
LOG_LEVEL = "DEBUG"

# Seeded generator: x = sin(seed * MULTIPLIER + INCREMENT) mod 1
PRNG_MULTIPLIER = 9301
PRNG_INCREMENT = 49297

# Region anchors, selected by seed mod len(REGION_ORDER)
REGION_ORDER = ("US", "EU", "Asia", "South")
REGION_ANCHORS = {
    "US": {"lat": 37.7, "lng": -122.4, "country": "United States"},
    "EU": {"lat": 48.8, "lng": 2.3, "country": "Germany"},
    "Asia": {"lat": 35.6, "lng": 139.6, "country": "Japan"},
    "South": {"lat": -23.5, "lng": -46.6, "country": "Brazil"},
}
LOCATION_JITTER = (-5, 5)

# Identity
HOST_PORT = 9982
PUBLIC_KEY_ALGORITHM = "ed25519"
PUBLIC_KEY_HEX_LENGTH = 64
SOFTWARE_NAME = "hostd"
OFFLINE_THRESHOLD = 0.15
NOT_ACCEPTING_THRESHOLD = 0.1

# Announcement history
FIRST_SEEN_DAYS = (30, 730)
LAST_ANNOUNCED_HOURS = (0, 48)

# Field ranges (min, max) fed to the seeded generator
HOST_RANGES = {
    "total_storage": (2, 50),
    "used_storage": (0.5, 20),
    "storage_price": (0.001, 0.005),
    "ingress_price": (0.0001, 0.001),
    "egress_price": (0.0005, 0.003),
    "contract_price": (0.01, 0.1),
    "sector_access_price": (0.00001, 0.0001),
    "collateral": (0.1, 5),
    "max_collateral": (5, 50),
    "upload_speed": (50, 500),
    "download_speed": (100, 1000),
    "uptime": (75, 99.9),
    "reliability": (70, 99),
    "contracts": (50, 600),
    "success_rate": (80, 99.5),
    "host_score": (60, 98),
}

# Daily series
HISTORY_DAYS = 30
UPTIME_HISTORY_FLOOR = 70
UPTIME_HISTORY_STEP = 0.3
UPTIME_HISTORY_CEILING = 99.9
PRICE_WAVE_PERIOD = 5
PRICE_WAVE_AMPLITUDE = 0.0005

# Dial geometry (SVG viewBox 0 0 200 200)
GAUGE_CENTER = (100, 100)
GAUGE_RADIUS = 80
NEEDLE_INSET = 15
TICK_LENGTH = 8
TICK_LABEL_INSET = 20
ARC_START_ANGLE = 135
ARC_END_ANGLE = 405
ARC_SWEEP = ARC_END_ANGLE - ARC_START_ANGLE

TICK_VALUES = (0, 1, 5, 10, 20, 30, 50, 75, 100)
MAJOR_TICK_VALUES = (0, 10, 50, 100)

SPEED_GAUGE_MAX = 1000
SPEED_UNIT = "Mbps"

# Summary tiers (lower bounds)
SCORE_TIERS = ((90, "high"), (70, "medium"))
UPTIME_TIERS = ((95, "high"), (80, "medium"))
LOWEST_TIER = "low"
MIN_PRICE_BAR_HEIGHT = 5
PUBLIC_KEY_DISPLAY_LENGTH = 30
