"""Query command configuration."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class QueryConfig:
    # Input
    csv_path: str | None = None
    date_column: str = "date"
    return_column: str = "return"

    # Query
    base: str = "2015-02-01"
    as_of: tuple[str, ...] = field(default_factory=tuple)
    no_data: str = "zero"           # "zero" or "nan"

    # Built-in sample history instead of a CSV
    demo: bool = False
