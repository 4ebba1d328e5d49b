# pieviz/data/dataset.py
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from pieviz.svl.errors import ChartConfigError, ChartDataError

Column = Union[str, int]


@dataclass(frozen=True)
class Dataset:
    """Rows are sequences (looked up through `headers`) or mappings (looked up by key)."""
    data: Sequence[Any]
    headers: Optional[List[str]] = None
    _keys: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # a key counts as a column only if every row carries it
        keys = None
        for row in self.data:
            row_keys = set(row.keys()) if isinstance(row, Mapping) else set()
            keys = row_keys if keys is None else keys & row_keys
        object.__setattr__(self, "_keys", frozenset(keys or ()))

    def has_column(self, col: Column) -> bool:
        if self.headers is not None and col in self.headers:
            return True
        if col in self._keys:
            return True
        if isinstance(col, int) and not isinstance(col, bool) and self.headers is None:
            return all(not isinstance(r, Mapping) and 0 <= col < len(r) for r in self.data)
        return False

    def column_index(self, col: Column) -> int:
        if self.headers is not None and col in self.headers:
            return self.headers.index(col)
        if isinstance(col, int) and not isinstance(col, bool):
            return col
        raise ChartConfigError(f"column '{col}' not found in dataset headers {self.headers}")

    def value_fn(self, col: Column) -> Callable[[Any], Any]:
        if not self.has_column(col):
            raise ChartConfigError(f"column '{col}' not found in dataset")
        key = col if col in self._keys else self.column_index(col)

        def value(row):
            try:
                return row[key]
            except (KeyError, IndexError, TypeError) as e:
                raise ChartDataError(f"row {row!r} has no value for column '{col}'") from e
        return value
