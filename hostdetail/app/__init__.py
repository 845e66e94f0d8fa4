import datetime
import math
import os
import threading

from flask import Flask, jsonify, request

from hostdetail.hosts.synthesizer import synthesize
from hostdetail.hosts.summary import summarize
from hostdetail.gauge.gauge import compute_gauge
from hostdetail.util.clock import utc_now, fixed_clock
from hostdetail.util.log import log_debug, log_info, log_warn
from hostdetail.config import (
    API_PORT,
    HOST_CACHE_SECONDS,
    SPEED_GAUGE_MAX,
    SPEED_UNIT,
)

app = Flask(__name__)

PORT = int(os.environ.get('API_PORT', API_PORT))

try:
    host_cache_seconds = max(0, int(os.environ.get('HOST_CACHE_SECONDS', HOST_CACHE_SECONDS)))
except ValueError:
    host_cache_seconds = HOST_CACHE_SECONDS

clock = utc_now
host_cache = {}
host_cache_lock = threading.Lock()

log_info(f"[HTTP] API port={PORT} host_cache_seconds={host_cache_seconds}")


def get_host(host_id):
    """
    Synthesize the host, reusing the record built earlier in the same cache window.
    Records in one window share the window's start as their notion of "now".
    """
    now = clock()
    if host_cache_seconds <= 0:
        return synthesize(host_id, clock=fixed_clock(now))

    bucket = int(now.timestamp()) // host_cache_seconds
    key = (host_id, bucket)
    with host_cache_lock:
        record = host_cache.get(key)
        if record is not None:
            return record

        window_start = datetime.datetime.fromtimestamp(bucket * host_cache_seconds, tz=now.tzinfo)
        record = synthesize(host_id, clock=fixed_clock(window_start))

        for stale_key in [k for k in host_cache if k[1] != bucket]:
            host_cache.pop(stale_key, None)
        host_cache[key] = record
        log_debug(f"[HOSTS] Cached host {host_id[:16]} bucket={bucket} entries={len(host_cache)}")
        return record


def _float_arg(name):
    raw = request.args.get(name)
    if raw is None:
        raise ValueError(f"{name} is required")
    try:
        number = float(raw)
    except ValueError:
        raise ValueError(f"invalid {name}")
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number")
    return number


@app.route("/hosts/<host_id>")
def route_host_detail(host_id):
    host = get_host(host_id)
    log_info(f"[HOSTS] Detail requested id={host_id[:16]} country={host.country}")
    return jsonify({
        "host": host.to_json(),
        "summary": summarize(host),
    })


@app.route("/hosts/<host_id>/gauges")
def route_host_gauges(host_id):
    host = get_host(host_id)
    upload = compute_gauge(host.upload_speed, SPEED_GAUGE_MAX, label="Upload Speed", unit=SPEED_UNIT)
    download = compute_gauge(host.download_speed, SPEED_GAUGE_MAX, label="Download Speed", unit=SPEED_UNIT)
    return jsonify({
        "id": host.id,
        "upload": upload.to_json(),
        "download": download.to_json(),
    })


@app.route("/gauge")
def route_gauge():
    try:
        value = _float_arg("value")
        max_value = _float_arg("max")
    except ValueError as exc:
        log_warn(f"[GAUGE] Rejected gauge request: {exc}")
        return jsonify({"error": str(exc)}), 400

    gauge = compute_gauge(
        value,
        max_value,
        label=request.args.get("label"),
        unit=request.args.get("unit"),
    )
    return jsonify(gauge.to_json())
