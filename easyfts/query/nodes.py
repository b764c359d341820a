# easyfts/query/nodes.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TermForm(Enum):
    """How a term is matched against the index."""

    INFLECTIONAL = "inflectional"
    THESAURUS = "thesaurus"
    LITERAL = "literal"


class Conjunction(Enum):
    """Operator joining two subexpressions."""

    AND = "and"
    OR = "or"
    NEAR = "near"

    @property
    def keyword(self) -> str:
        return self.name


@dataclass(frozen=True)
class Node:
    """Base expression tree node."""


@dataclass(frozen=True)
class Terminal(Node):
    """Leaf node: a single search term."""

    term: str
    term_form: TermForm = TermForm.INFLECTIONAL
    exclude: bool = False
    grouped: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "term": self.term,
            "term_form": self.term_form.value,
            "exclude": self.exclude,
            "grouped": self.grouped,
        }


@dataclass(frozen=True)
class Internal(Node):
    """Two subexpressions joined by a conjunction.

    ``exclude`` is derived from the children when the node is built: only an
    expression whose operands are all negated is itself negated.
    """

    left: Node
    right: Node
    conjunction: Conjunction = Conjunction.AND
    grouped: bool = False
    exclude: bool = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude", self.left.exclude and self.right.exclude)

    def to_dict(self) -> dict[str, Any]:
        # Trees grow on the left, so walk that side without recursing
        spine = left_spine(self)
        data = spine[-1].left.to_dict()
        for node in reversed(spine):
            data = {
                "conjunction": node.conjunction.value,
                "exclude": node.exclude,
                "grouped": node.grouped,
                "left": data,
                "right": node.right.to_dict(),
            }
        return data


def left_spine(node: Internal) -> list[Internal]:
    """Return the chain of internal nodes from ``node`` down its left side."""
    spine = [node]
    while isinstance(spine[-1].left, Internal):
        spine.append(spine[-1].left)
    return spine
