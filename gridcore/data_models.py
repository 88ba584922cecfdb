"""Core data structures for the grid layout engine.

Value types shared by the resolver, the row packer and the coordinator.
Everything published to children is immutable; a recomputation always
produces new instances.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

DEFAULT_BREAKPOINT = "default"
AUTO = "auto"


@dataclass(frozen=True, slots=True)
class ResponsiveSpec:
    """Breakpoint name -> integer value, at most one value per name."""
    entries: Tuple[Tuple[str, int], ...] = ()

    @classmethod
    def from_mapping(cls, values: Mapping[str, int]) -> "ResponsiveSpec":
        return cls(tuple((str(name), int(value)) for name, value in values.items()))

    def get(self, name: str, default: Optional[int] = None) -> Optional[int]:
        for key, value in self.entries:
            if key == name:
                return value
        return default

    def __getitem__(self, name: str) -> int:
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self.entries)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def as_dict(self) -> Dict[str, int]:
        return dict(self.entries)


class FlowDirection(str, Enum):
    """Main axis of the grid container."""
    ROW = "row"
    COLUMN = "column"
    ROW_REVERSE = "row-reverse"
    COLUMN_REVERSE = "column-reverse"

    @property
    def is_column(self) -> bool:
        """True when children stack vertically and no width is redistributed."""
        return "column" in self.value

    @classmethod
    def parse(cls, value: "FlowDirection | str | None") -> "FlowDirection":
        if value is None:
            return cls.ROW
        return cls(value)


@dataclass(frozen=True, slots=True)
class GapSettings:
    """Gap values in pixels."""
    gap: float = 0
    row_gap: float = 0
    column_gap: float = 0

    @property
    def horizontal(self) -> float:
        """Gutter charged between items of the same row."""
        return self.column_gap or self.gap or 0


@dataclass(frozen=True, slots=True)
class ContainerInsets:
    """
    Padding and border values of the grid container.

    Side-specific values take precedence over the symmetric ones; an
    explicit zero still counts as set.
    """
    padding: Optional[float] = None
    padding_left: Optional[float] = None
    padding_right: Optional[float] = None
    padding_start: Optional[float] = None
    padding_end: Optional[float] = None
    border_width: Optional[float] = None
    border_left_width: Optional[float] = None
    border_right_width: Optional[float] = None

    @staticmethod
    def _first(*values: Optional[float]) -> float:
        for value in values:
            if value is not None:
                return value
        return 0

    @property
    def left(self) -> float:
        return (self._first(self.padding_start, self.padding_left, self.padding) +
                self._first(self.border_left_width, self.border_width))

    @property
    def right(self) -> float:
        return (self._first(self.padding_end, self.padding_right, self.padding) +
                self._first(self.border_right_width, self.border_width))

    def content_width(self, measured_width: float) -> float:
        """Usable width once padding and borders are subtracted."""
        return measured_width - self.left - self.right


@dataclass(frozen=True, slots=True)
class RowAssignment:
    """
    Grouping of child indices into 1-based, contiguous rows.

    The index -> row lookup table is built once when the assignment is
    created so per-child sizing does not scan every row.
    """
    rows: Tuple[Tuple[int, ...], ...] = ()
    _row_of: Mapping[int, int] = field(default_factory=lambda: MappingProxyType({}), repr=False, compare=False)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "RowAssignment":
        frozen = tuple(tuple(row) for row in rows)
        lookup = {index: number for number, row in enumerate(frozen, start=1) for index in row}
        return cls(rows=frozen, _row_of=MappingProxyType(lookup))

    def row_number(self, index: int) -> Optional[int]:
        """Row holding the child at ``index``, or None if unassigned."""
        return self._row_of.get(index)

    def members(self, row_number: int) -> Tuple[int, ...]:
        if 1 <= row_number <= len(self.rows):
            return self.rows[row_number - 1]
        return ()

    def row_size(self, index: int) -> int:
        """Number of children sharing a row with ``index`` (0 if unassigned)."""
        row_number = self.row_number(index)
        if row_number is None:
            return 0
        return len(self.members(row_number))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def item_count(self) -> int:
        return len(self._row_of)

    def as_dict(self) -> Dict[int, List[int]]:
        return {number: list(row) for number, row in enumerate(self.rows, start=1)}

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True, slots=True)
class GridContext:
    """
    Snapshot published by the grid coordinator.

    Readers hold on to the instance they were handed; a new measurement
    publishes a new snapshot instead of mutating this one.
    """
    calculated_width: Optional[float] = None
    viewport_width: Optional[float] = None
    column_count: int = 12
    rows: RowAssignment = field(default_factory=RowAssignment)
    flow_direction: FlowDirection = FlowDirection.ROW
    gaps: GapSettings = field(default_factory=GapSettings)
    generation: int = 0

    @property
    def is_measured(self) -> bool:
        return self.calculated_width is not None and self.calculated_width > 0

    @property
    def gutter(self) -> float:
        return self.gaps.horizontal

    def __str__(self) -> str:
        return (f"GridContext(width={self.calculated_width}, columns={self.column_count}, "
                f"rows={self.rows.row_count}, gen={self.generation})")
