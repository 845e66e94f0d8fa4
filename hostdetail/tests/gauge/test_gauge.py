import math

import pytest

from hostdetail.gauge.gauge import (
    GaugeSpec,
    compute_gauge,
    describe_arc,
    gauge_percentage,
    large_arc_flag,
    polar_to_cartesian,
    ticks_for,
)


def _point(x, y):
    return pytest.approx((x, y), abs=1e-9)


def test_percentage_is_clamped():
    assert gauge_percentage(50, 200) == 25
    assert gauge_percentage(300, 200) == 100
    assert gauge_percentage(-10, 200) == 0


def test_zero_max_reads_as_empty():
    gauge = compute_gauge(42, 0)

    assert gauge.percentage == 0
    assert gauge.value_angle == 135
    assert gauge.value == 42


def test_undefined_ratio_reads_as_empty():
    assert gauge_percentage(math.nan, 100) == 0
    assert gauge_percentage(math.inf, 100) == 100


def test_value_angle_endpoints():
    assert compute_gauge(0, 100).value_angle == 135
    assert compute_gauge(50, 100).value_angle == 270
    assert compute_gauge(100, 100).value_angle == 405


def test_value_angle_is_monotonic():
    angles = [compute_gauge(value, 1000).value_angle for value in range(0, 1001, 7)]

    assert angles == sorted(angles)


def test_values_above_max_clip_to_max_angle():
    at_max = compute_gauge(1000, 1000)

    assert compute_gauge(1500, 1000).value_angle == at_max.value_angle
    assert compute_gauge(1500, 1000).needle == at_max.needle
    assert compute_gauge(1500, 1000).value == 1500


def test_needle_angle_matches_value_angle():
    gauge = compute_gauge(320, 1000)

    assert gauge.needle_angle == gauge.value_angle


def test_polar_to_cartesian_uses_svg_orientation():
    assert polar_to_cartesian(100, 100, 80, 270) == _point(100, 20)
    assert polar_to_cartesian(100, 100, 80, 0) == _point(180, 100)
    assert polar_to_cartesian(100, 100, 80, 90) == _point(100, 180)

    # the dial opens downwards
    start_x, start_y = polar_to_cartesian(100, 100, 80, 135)
    end_x, end_y = polar_to_cartesian(100, 100, 80, 405)
    assert start_x < 100 < end_x
    assert start_y > 100 and end_y > 100


def test_large_arc_flag_uses_angle_difference():
    assert large_arc_flag(135, 135) == 0
    assert large_arc_flag(135, 315) == 0
    assert large_arc_flag(135, 316) == 1
    assert large_arc_flag(135, 494) == 1


def test_describe_arc_path():
    path = describe_arc(100, 100, 80, 270, 360)

    assert path == "M 100.000 20.000 A 80 80 0 0 1 180.000 100.000"


def test_track_path_is_large_arc():
    gauge = compute_gauge(10, 100)

    assert " A 80 80 0 1 1 " in gauge.track_path
    assert " A 80 80 0 0 1 " in gauge.value_path


def test_needle_is_inset_from_the_dial():
    gauge = compute_gauge(720, 1000)
    x, y = gauge.needle

    assert math.hypot(x - 100, y - 100) == pytest.approx(65)


def test_ticks_are_filtered_by_max():
    assert [tick.value for tick in ticks_for(1000)] == [0, 1, 5, 10, 20, 30, 50, 75, 100]
    assert [tick.value for tick in ticks_for(20)] == [0, 1, 5, 10, 20]
    assert [tick.value for tick in ticks_for(0)] == [0]


def test_major_ticks():
    majors = [tick.value for tick in ticks_for(100) if tick.major]

    assert majors == [0, 10, 50, 100]
    assert [tick.value for tick in ticks_for(30) if tick.major] == [0, 10, 30]


def test_tick_angles_follow_value_angle():
    for tick in ticks_for(100):
        assert tick.angle == compute_gauge(tick.value, 100).value_angle


def test_tick_marks_span_the_rim():
    tick = ticks_for(100)[-1]

    assert math.hypot(tick.outer[0] - 100, tick.outer[1] - 100) == pytest.approx(80)
    assert math.hypot(tick.inner[0] - 100, tick.inner[1] - 100) == pytest.approx(72)
    assert math.hypot(tick.label_point[0] - 100, tick.label_point[1] - 100) == pytest.approx(60)


def test_gauge_to_json():
    gauge_json = compute_gauge(250, 1000, label="Upload Speed", unit="Mbps").to_json()

    assert isinstance(compute_gauge(1, 2), GaugeSpec)
    assert gauge_json["label"] == "Upload Speed"
    assert gauge_json["unit"] == "Mbps"
    assert gauge_json["percentage"] == 25
    assert gauge_json["arc_start_angle"] == 135
    assert gauge_json["arc_end_angle"] == 405
    assert len(gauge_json["ticks"]) == 9
    assert len(gauge_json["needle"]) == 2
