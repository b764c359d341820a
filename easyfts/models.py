# easyfts/models.py
from dataclasses import dataclass
from typing import Any

from easyfts.query.nodes import Node


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one search expression."""

    query: str
    fts_query: str
    tree: Node | None = None

    @property
    def empty(self) -> bool:
        """True when nothing usable survived the conversion."""
        return not self.fts_query

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "fts_query": self.fts_query,
            "tree": self.tree.to_dict() if self.tree is not None else None,
        }
