# pieviz/ve/pie_chart.py
"""
A pie chart over a Dataset.

Slices are proportional to each category's share of the total. Colours come from
the `colour_scale` option when one is supplied, otherwise from `colour_palette`
applied to the categories in order of first appearance.

    dataset = Dataset([["Cat", 10.0], ["Dog", 20.0], ["Hamster", 5.0]], ["Pet", "Preference"])
    chart = PieChart.new(dataset, mapping={"category_col": "Pet", "value_col": "Preference"},
                         colour_palette=["fbb4ae", "b3cde3", "ccebc5"])
    svg = chart.to_svg()
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Any, Hashable, List, Tuple

from pydantic import ValidationError

from pieviz.data.dataset import Dataset
from pieviz.svl.errors import ChartConfigError
from pieviz.svl.pie_spec import ColumnMapping, PieOptions
from pieviz.svl.pie_verify import NormalizedShare, scale_values
from .colour_scale import CategoryColourScale
from .slice_layout import SlicePlacement, layout_slices
from .svg_adapter import slices_svg

REQUIRED_MAPPINGS = ("category_col", "value_col")


def _check_mapping(mapping: ColumnMapping, dataset: Dataset) -> None:
    for key in REQUIRED_MAPPINGS:
        col = getattr(mapping, key)
        if col is None:
            raise ChartConfigError(f"required mapping '{key}' is missing")
        if not dataset.has_column(col):
            raise ChartConfigError(f"mapping '{key}' refers to column '{col}', which is not in the dataset")


@dataclass(frozen=True)
class PieChart:
    dataset: Dataset
    options: PieOptions

    @classmethod
    def new(cls, dataset: Dataset, **options: Any) -> "PieChart":
        try:
            opts = PieOptions(**options)
        except ValidationError as e:
            raise ChartConfigError(f"bad pie chart options: {e}") from e
        _check_mapping(opts.mapping, dataset)
        return cls(dataset=dataset, options=opts)

    # --- configuration (always returns a new chart) ---

    def _with(self, **changes: Any) -> "PieChart":
        try:
            opts = PieOptions(**{**self.options.model_dump(exclude={"colour_scale"}),
                                 "colour_scale": self.options.colour_scale, **changes})
        except ValidationError as e:
            raise ChartConfigError(f"bad pie chart options: {e}") from e
        return replace(self, options=opts)

    def set_size(self, width: float, height: float) -> "PieChart":
        return self._with(width=width, height=height)

    def colours(self, colour_palette) -> "PieChart":
        if not isinstance(colour_palette, (str, list, tuple)):
            colour_palette = "default"
        return self._with(colour_palette=colour_palette)

    # --- data access ---

    @property
    def mapping(self) -> ColumnMapping:
        return self.options.mapping

    def get_categories(self) -> List[Hashable]:
        cat = self.dataset.value_fn(self.mapping.category_col)
        return [cat(row) for row in self.dataset.data]

    def observations(self) -> List[Tuple[Hashable, Any]]:
        cat = self.dataset.value_fn(self.mapping.category_col)
        val = self.dataset.value_fn(self.mapping.value_col)
        return [(cat(row), val(row)) for row in self.dataset.data]

    def scale_values(self) -> List[NormalizedShare]:
        return scale_values(self.observations())

    @cached_property
    def colour_scale(self) -> CategoryColourScale:
        if self.options.colour_scale is not None:
            return self.options.colour_scale
        return CategoryColourScale.new(self.get_categories()).set_palette(self.options.colour_palette)

    def get_legend_scales(self) -> List[CategoryColourScale]:
        return [self.colour_scale]

    # --- rendering ---

    def layout(self) -> List[SlicePlacement]:
        return layout_slices(
            self.scale_values(),
            self.options.radius,
            self.colour_scale.colour_for_value,
            with_labels=self.options.data_labels,
        )

    def to_svg(self) -> str:
        return slices_svg(self.layout())
