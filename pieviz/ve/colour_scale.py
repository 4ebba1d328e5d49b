# pieviz/ve/colour_scale.py
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, Union

DEFAULT_COLOUR = "fa8866"

# Hex without the leading '#'.
PALETTES: Dict[str, List[str]] = {
    "default": ["1f77b4", "ff7f0e", "2ca02c", "d62728", "9467bd",
                "8c564b", "e377c2", "7f7f7f", "bcbd22", "17becf"],
    "pastel1": ["fbb4ae", "b3cde3", "ccebc5", "decbe4", "fed9a6",
                "ffffcc", "e5d8bd", "fddaec", "f2f2f2"],
    # colour-blind friendly (Okabe-Ito)
    "cbf": ["e69f00", "56b4e9", "009e73", "f0e442", "0072b2",
            "d55e00", "cc79a7", "000000"],
}


def resolve_palette(palette: Union[str, Sequence[str], None]) -> List[str]:
    if palette is None:
        return list(PALETTES["default"])
    if isinstance(palette, str):
        return list(PALETTES.get(palette, PALETTES["default"]))
    return list(palette) or list(PALETTES["default"])


@dataclass(frozen=True)
class CategoryColourScale:
    """Maps each category to a palette colour by first-appearance index, cycling the palette."""
    values: tuple = ()
    palette: tuple = tuple(PALETTES["default"])
    _index: Dict[Any, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index: Dict[Any, int] = {}
        for i, v in enumerate(self.values):
            index.setdefault(v, i)
        object.__setattr__(self, "_index", index)

    @classmethod
    def new(cls, categories: Iterable[Hashable]) -> "CategoryColourScale":
        return cls(values=tuple(dict.fromkeys(categories)))

    def set_palette(self, palette: Union[str, Sequence[str], None]) -> "CategoryColourScale":
        return replace(self, palette=tuple(resolve_palette(palette)))

    def colour_for_value(self, value: Any) -> str:
        i: Optional[int] = self._index.get(value)
        if i is None or not self.palette:
            return DEFAULT_COLOUR
        return self.palette[i % len(self.palette)]

    def legend_entries(self) -> List[tuple]:
        return [(v, self.colour_for_value(v)) for v in self.values]
