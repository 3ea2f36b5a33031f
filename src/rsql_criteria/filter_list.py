"""
Boolean AND/OR composition of filter expressions and nested lists.

Parenthesisation rules:

- a list never wraps itself, unless it was created ``grouped``
  (as the merged where clause of two criteria is);
- a nested list is wrapped by its parent when it renders two or more
  non-empty parts;
- entries rendering to the empty string are skipped, together with their
  connective.
"""

from __future__ import annotations

import copy
from typing import Any, NamedTuple, Union

from .base import Composable
from .encoding import percent_encode
from .expression import FilterExpression
from .operators import Connective

FilterNode = Union[FilterExpression, "FilterList"]


class FilterEntry(NamedTuple):
    connective: Connective | None
    node: FilterNode


class FilterList(Composable):
    """Ordered filter entries, each joined to its predecessor by a connective."""

    def __init__(self, *, grouped: bool = False) -> None:
        self.entries: list[FilterEntry] = []
        self.grouped = grouped

    # -- composition ---------------------------------------------------------

    def and_(self, node: FilterNode) -> FilterList:
        """Append *node* joined with AND and return ``self``."""
        return self.add(node, Connective.AND)

    def or_(self, node: FilterNode) -> FilterList:
        """Append *node* joined with OR and return ``self``."""
        return self.add(node, Connective.OR)

    def add(
        self,
        node: FilterNode,
        connective: Connective | str = Connective.AND,
    ) -> FilterList:
        """Append *node*; the first entry never carries a connective."""
        joined_by = Connective(connective) if self.entries else None
        self.entries.append(FilterEntry(joined_by, node))
        return self

    def copy(self) -> FilterList:
        """Return an independent deep copy."""
        return copy.deepcopy(self)

    # -- rendering -----------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        """``True`` when the list renders to the empty string."""
        return not self._parts()

    def build(self) -> str:
        return self._render(nested=False)

    def _render(self, *, nested: bool) -> str:
        parts = self._parts()
        text = "".join(
            fragment
            if connective is None
            else percent_encode(f" {connective.value} ") + fragment
            for connective, fragment in parts
        )
        if len(parts) > 1 and (nested or self.grouped):
            return f"({text})"
        return text

    def _parts(self) -> list[tuple[Connective | None, str]]:
        parts: list[tuple[Connective | None, str]] = []
        for entry in self.entries:
            if isinstance(entry.node, FilterList):
                fragment = entry.node._render(nested=True)
            else:
                fragment = entry.node.build()
            if fragment:
                parts.append((entry.connective if parts else None, fragment))
        return parts

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "grouped": self.grouped,
            "conditions": [
                {
                    "connective": e.connective.value if e.connective else None,
                    **e.node.to_dict(),
                }
                for e in self.entries
            ],
        }

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"FilterList({self.entries!r}, grouped={self.grouped})"
