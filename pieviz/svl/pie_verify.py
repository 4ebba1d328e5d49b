# pieviz/svl/pie_verify.py
from __future__ import annotations
import numbers
import os
from typing import Any, Hashable, Iterable, List, Mapping, NamedTuple, Tuple

import numpy as np

from .errors import ChartDataError, DegenerateTotalError, NegativeValueError
from .pie_spec import PieSpec

MAX_SLICES = int(os.environ.get("PIEVIZ_MAX_SLICES", "50"))


class NormalizedShare(NamedTuple):
    percentage: float
    category: Hashable


def scale_values(observations: Iterable[Tuple[Hashable, float]]) -> List[NormalizedShare]:
    """
    Turn ordered (category, value) observations into percentage-of-total shares.
    - order is kept, duplicate categories stay separate slices
    - negative values and an all-zero total are rejected
    """
    obs = list(observations)
    if not obs:
        return []
    cats = [c for c, _ in obs]
    for c, v in obs:
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise ChartDataError(f"pie values must be real numbers (got {v!r} for {c!r}).")
    try:
        vals = np.asarray([v for _, v in obs], dtype=float)
    except OverflowError as e:
        raise ChartDataError(f"pie values must be finite: {e}") from e

    if not np.all(np.isfinite(vals)):
        raise ChartDataError("pie values must be finite.")
    neg = np.flatnonzero(vals < 0)
    if neg.size:
        i = int(neg[0])
        raise NegativeValueError(f"pie values must be ≥ 0 (got {vals[i]!r} for {cats[i]!r}).")
    peak = vals.max()
    if peak == 0:
        raise DegenerateTotalError("pie values sum to 0; nothing to divide into slices.")

    # scaled into [0, 1] first so the sum cannot overflow
    scaled = vals / peak
    pct = scaled / scaled.sum() * 100
    return [NormalizedShare(float(p), c) for p, c in zip(pct, cats)]


def verify_pie(raw: Mapping[str, Any]) -> PieSpec:
    """
    Validate a proposed pie payload.
    - schema checks (lengths, finite numbers, palette)
    - caps the number of categories
    """
    spec = PieSpec(**raw)
    if len(spec.labels) > MAX_SLICES:
        raise ValueError(f"Too many categories; cap at {MAX_SLICES}.")
    return spec
