"""Ordered ``(field, direction)`` sort clauses."""

from __future__ import annotations

from collections.abc import Iterator

from .encoding import percent_encode
from .exceptions import ValidationError
from .operators import SortDirection

_DIRECTIONS: dict[str, SortDirection] = {d.value: d for d in SortDirection}


class OrderByList:
    """Sort clauses rendered as ``field direction`` pairs joined by ``, ``."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, SortDirection]] = []

    def add(
        self,
        field: str,
        direction: SortDirection | str = SortDirection.ASC,
    ) -> OrderByList:
        """Append a sort clause and return ``self``."""
        if not field:
            raise ValidationError("Sort field must be a non-empty string", path="field")
        resolved = (
            _DIRECTIONS.get(direction.lower()) if isinstance(direction, str) else None
        )
        if resolved is None:
            raise ValidationError(
                f"Invalid sort direction {direction!r} for '{field}' "
                "(expected 'asc' or 'desc')",
                path=field,
            )
        self.entries.append((field, resolved))
        return self

    def copy(self) -> OrderByList:
        clone = OrderByList()
        clone.entries = list(self.entries)
        return clone

    def build(self) -> str:
        return percent_encode(
            ", ".join(f"{field} {direction.value}" for field, direction in self.entries)
        )

    def __iter__(self) -> Iterator[tuple[str, SortDirection]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
