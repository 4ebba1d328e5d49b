# pieviz/ve/slice_layout.py
"""
Slice geometry and label placement.

Each slice is a circle of radius r/2 stroked with width r, so the stroke fills the
whole disc. The stroke path is pi*r long; a dash of `percentage` of that length,
shifted back by the cumulative offset, draws exactly one slice.
"""
from __future__ import annotations
import math
from dataclasses import asdict, dataclass
from typing import Callable, Hashable, List, Optional, Sequence, Tuple

from pieviz.svl.pie_verify import NormalizedShare
from .geometry import need_flip, negate_if_flipped, rotate_for, slice_value

ColourLookup = Callable[[Hashable], str]

SMALL_LABEL_PERCENT = 5.0
LABEL_NUDGE = 5


@dataclass(frozen=True)
class SegmentDescriptor:
    radius: float
    circumference: float
    dash_length: float
    dash_offset: float       # ≤ 0
    colour: str              # hex, no '#'


@dataclass(frozen=True)
class LabelDescriptor:
    x: float
    y: float
    rotation: float
    flipped: bool
    small: bool
    translate: Tuple[float, float]
    text: str


@dataclass(frozen=True)
class SlicePlacement:
    index: int
    category: Hashable
    percentage: float
    offset: float            # cumulative percentage before this slice
    segment: SegmentDescriptor
    label: Optional[LabelDescriptor]

    def to_dict(self) -> dict:
        d = asdict(self)
        d["category"] = self.category if isinstance(self.category, (str, int, float)) else str(self.category)
        return d


def display_percentage(percentage: float) -> float:
    return round(percentage, 2)


def _label_for(percentage: float, offset: float, r: float) -> LabelDescriptor:
    rotation = rotate_for(percentage, offset)
    shown = display_percentage(percentage)
    anchor = negate_if_flipped(r, rotation)
    return LabelDescriptor(
        x=anchor,
        y=anchor,
        rotation=rotation,
        flipped=need_flip(rotation),
        small=shown <= SMALL_LABEL_PERCENT,
        translate=(r / 2, negate_if_flipped(LABEL_NUDGE, rotation)),
        text=f"{shown}%",
    )


def layout_slices(shares: Sequence[NormalizedShare], radius: float,
                  colour_of: ColourLookup, with_labels: bool = True) -> List[SlicePlacement]:
    """Left fold over the shares carrying (index, cumulative offset)."""
    if not radius > 0:
        raise ValueError(f"radius must be > 0 (got {radius!r}).")
    circumference = math.pi * radius

    out: List[SlicePlacement] = []
    idx, offset = 0, 0.0
    for percentage, category in shares:
        segment = SegmentDescriptor(
            radius=radius,
            circumference=circumference,
            dash_length=slice_value(percentage, circumference),
            dash_offset=-slice_value(offset, circumference),
            colour=colour_of(category),
        )
        label = _label_for(percentage, offset, radius) if with_labels else None
        out.append(SlicePlacement(idx, category, percentage, offset, segment, label))
        idx, offset = idx + 1, offset + percentage
    return out
