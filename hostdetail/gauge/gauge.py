import math

from hostdetail.config import (
    GAUGE_CENTER,
    GAUGE_RADIUS,
    NEEDLE_INSET,
    TICK_LENGTH,
    TICK_LABEL_INSET,
    ARC_START_ANGLE,
    ARC_END_ANGLE,
    ARC_SWEEP,
    TICK_VALUES,
    MAJOR_TICK_VALUES,
)


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float):
    """
    Point on a circle in SVG orientation: y grows downwards and angles
    turn clockwise from the positive x axis.
    """
    radians = math.radians(angle)
    return (cx + radius * math.cos(radians), cy + radius * math.sin(radians))


def large_arc_flag(start_angle: float, end_angle: float) -> int:
    return 1 if end_angle - start_angle > 180 else 0


def describe_arc(cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> str:
    """
    SVG path data for a clockwise arc from start_angle to end_angle.
    """
    start_x, start_y = polar_to_cartesian(cx, cy, radius, start_angle)
    end_x, end_y = polar_to_cartesian(cx, cy, radius, end_angle)
    return (
        f"M {start_x:.3f} {start_y:.3f} "
        f"A {radius} {radius} 0 {large_arc_flag(start_angle, end_angle)} 1 "
        f"{end_x:.3f} {end_y:.3f}"
    )


def gauge_percentage(value: float, max_value: float) -> float:
    """
    Share of the dial covered by value, clamped to [0, 100].
    A zero maximum or an undefined ratio reads as an empty dial.
    """
    if not max_value:
        return 0.0
    percentage = 100 * value / max_value
    if math.isnan(percentage):
        return 0.0
    return min(max(percentage, 0.0), 100.0)


def angle_for(value: float, max_value: float) -> float:
    return ARC_START_ANGLE + gauge_percentage(value, max_value) / 100 * ARC_SWEEP


class Tick:
    def __init__(self, value, max_value):
        cx, cy = GAUGE_CENTER
        self.value = value
        self.angle = angle_for(value, max_value)
        self.major = value in MAJOR_TICK_VALUES or value == max_value
        self.inner = polar_to_cartesian(cx, cy, GAUGE_RADIUS - TICK_LENGTH, self.angle)
        self.outer = polar_to_cartesian(cx, cy, GAUGE_RADIUS, self.angle)
        self.label_point = polar_to_cartesian(cx, cy, GAUGE_RADIUS - TICK_LABEL_INSET, self.angle)

    def __repr__(self):
        return f'Tick(value: {self.value}, angle: {self.angle}, major: {self.major})'

    def to_json(self):
        return {
            "value": self.value,
            "angle": self.angle,
            "major": self.major,
            "inner": list(self.inner),
            "outer": list(self.outer),
            "label_point": list(self.label_point),
        }


def ticks_for(max_value):
    return [Tick(value, max_value) for value in TICK_VALUES if value <= max_value]


class GaugeSpec:
    """
    Geometry for one dial: background track, value arc, needle and ticks.
    """
    def __init__(self, value, max_value, label=None, unit=None):
        cx, cy = GAUGE_CENTER
        self.value = value
        self.max_value = max_value
        self.label = label
        self.unit = unit
        self.percentage = gauge_percentage(value, max_value)
        self.arc_start_angle = ARC_START_ANGLE
        self.arc_end_angle = ARC_END_ANGLE
        self.value_angle = ARC_START_ANGLE + self.percentage / 100 * ARC_SWEEP
        self.track_path = describe_arc(cx, cy, GAUGE_RADIUS, ARC_START_ANGLE, ARC_END_ANGLE)
        self.value_path = describe_arc(cx, cy, GAUGE_RADIUS, ARC_START_ANGLE, self.value_angle)
        self.needle = polar_to_cartesian(cx, cy, GAUGE_RADIUS - NEEDLE_INSET, self.value_angle)
        self.ticks = ticks_for(max_value)

    @property
    def needle_angle(self):
        return self.value_angle

    def __repr__(self):
        return f'GaugeSpec(value: {self.value}, max: {self.max_value}, angle: {self.value_angle})'

    def to_json(self):
        return {
            "value": self.value,
            "max": self.max_value,
            "label": self.label,
            "unit": self.unit,
            "percentage": self.percentage,
            "arc_start_angle": self.arc_start_angle,
            "arc_end_angle": self.arc_end_angle,
            "value_angle": self.value_angle,
            "center": list(GAUGE_CENTER),
            "radius": GAUGE_RADIUS,
            "track_path": self.track_path,
            "value_path": self.value_path,
            "needle": list(self.needle),
            "ticks": [tick.to_json() for tick in self.ticks],
        }


def compute_gauge(value, max_value, label=None, unit=None) -> GaugeSpec:
    return GaugeSpec(value, max_value, label=label, unit=unit)
