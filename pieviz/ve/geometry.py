# pieviz/ve/geometry.py
# Angles are degrees, 0 at 12 o'clock, increasing clockwise. One percent of the pie is 3.6°.

DEGREES_PER_PERCENT = 3.6


def rotate_for(share: float, offset: float) -> float:
    """Mid-angle of a slice covering `share` percent that starts `offset` percent round the ring."""
    return share / 2 * DEGREES_PER_PERCENT + offset * DEGREES_PER_PERCENT


def need_flip(rotation: float) -> bool:
    """Labels in the lower half would render upside-down."""
    return 90 < rotation < 270


def negate_if_flipped(value: float, rotation: float) -> float:
    return -value if need_flip(rotation) else value


def slice_value(percentage: float, circumference: float) -> float:
    return percentage * circumference / 100
