"""Error taxonomy for the field survey pipeline.

Every error is fatal to a run. Each one names the offending table, row,
column or value so the bad record can be found in the raw data.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class SurveyPipelineError(Exception):
    """Base error for the fieldsurvey package."""


@dataclass
class MalformedTableError(SurveyPipelineError):
    """Raised when a raw table does not hold exactly one packed column."""

    table: str
    columns: List[str]

    def __post_init__(self) -> None:
        super().__init__(
            f"{self.table}: expected one packed column, found "
            f"{len(self.columns)} ({', '.join(map(str, self.columns))})"
        )


@dataclass
class MalformedRowError(SurveyPipelineError):
    """Raised when a packed value splits into the wrong number of tokens."""

    table: str
    row: Any
    value: Any
    expected: int
    actual: int

    def __post_init__(self) -> None:
        super().__init__(
            f"{self.table}:row {self.row}: expected {self.expected} fields, "
            f"got {self.actual} in {self.value!r}"
        )


@dataclass
class CastError(SurveyPipelineError):
    """Raised when a value cannot be parsed as its column's type."""

    column: str
    value: Any
    target_type: str
    row: Optional[Any] = None

    def __post_init__(self) -> None:
        location = f"column {self.column}"
        if self.row is not None:
            location = f"row {self.row},{location}"
        super().__init__(
            f"{location}: cannot cast {self.value!r} to {self.target_type}"
        )


@dataclass
class AmbiguousJoinKeyError(SurveyPipelineError):
    """Raised when a join key is duplicated on the right side of a left join."""

    table: str
    key: str
    duplicates: List[Any]

    def __post_init__(self) -> None:
        shown = ", ".join(repr(v) for v in self.duplicates[:10])
        more = "" if len(self.duplicates) <= 10 else f" (+{len(self.duplicates) - 10} more)"
        super().__init__(
            f"{self.table}: join key {self.key!r} is not unique: {shown}{more}"
        )


@dataclass
class InvariantViolationError(SurveyPipelineError):
    """Raised when transect-level attributes vary within one transect."""

    transect_number: Any
    values: Dict[str, List[Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        detail = "; ".join(f"{col}={vals!r}" for col, vals in self.values.items())
        super().__init__(
            f"transect {self.transect_number}: attributes not constant ({detail})"
        )
