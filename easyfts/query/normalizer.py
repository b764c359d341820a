# easyfts/query/normalizer.py
"""Repairs expression trees that would produce an invalid full-text query.

A well-formed tree can still describe a query the search engine refuses.
Problem expressions are corrected bottom-up:

    NOT a AND b         operands swapped
    NOT a               discarded
    NOT a AND NOT b     discarded if grouped or at the root; otherwise the
                        parent may combine it with a term that makes it valid
    a OR NOT b          negated operand discarded
    a NEAR NOT b        NEAR changed to AND

NEAR is only kept when both operands are literal terms.
"""

import logging
from dataclasses import replace

from easyfts.query.nodes import Conjunction, Internal, Node, Terminal, TermForm, left_spine

logger = logging.getLogger(__name__)


def normalize(node: Node | None, is_root: bool = False) -> Node | None:
    """Return a tree that renders to a valid query, or None if nothing is left."""
    if not isinstance(node, Internal):
        return _discard_excluded(node, is_root)

    # Each term adds a level on the left; only nested blocks recurse
    spine = left_spine(node)
    result = _discard_excluded(spine[-1].left, False)
    for internal in reversed(spine):
        result = _repair(internal, result, normalize(internal.right))
        result = _discard_excluded(result, is_root and internal is node)
    return result


def _discard_excluded(node: Node | None, is_root: bool) -> Node | None:
    # A group of nothing but exclusions cannot match on its own
    if node is not None and (node.grouped or is_root) and node.exclude:
        logger.debug("Discarding excluded %s", type(node).__name__)
        return None
    return node


def _repair(node: Internal, left: Node | None, right: Node | None) -> Node | None:
    """Rebuild an internal node from its normalized children."""
    conjunction = node.conjunction

    match conjunction:
        case Conjunction.NEAR:
            if _invalid_with_near(left) or _invalid_with_near(right):
                conjunction = Conjunction.AND
        case Conjunction.OR:
            if _invalid_with_or(left):
                left = None
            if _invalid_with_or(right):
                right = None

    if left is None:
        return right
    if right is None:
        return left

    # Negated operand cannot come first
    if left.exclude and not right.exclude:
        left, right = right, left
    return replace(node, left=left, right=right, conjunction=conjunction)


def _invalid_with_near(node: Node | None) -> bool:
    return not (isinstance(node, Terminal) and node.term_form is TermForm.LITERAL)


def _invalid_with_or(node: Node | None) -> bool:
    return node is None or node.exclude
