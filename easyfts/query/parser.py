# easyfts/query/parser.py
"""Parser for Google-like search expressions.

Supported syntax:

    abc                 inflectional forms of abc
    ~abc                thesaurus variations of abc
    +abc                exact term abc
    "abc def"           exact phrase abc def
    abc*                words starting with abc
    -abc, NOT abc       exclude inflectional forms of abc
    abc def             both abc and def
    abc or def          either abc or def
    <abc def>           abc near def
    abc and (def or ghi)

Input is never rejected: unbalanced delimiters and unterminated quotes run to
the end of the text, and empty or stop-listed terms are dropped.
"""

from collections.abc import Container, Iterable
from dataclasses import dataclass, replace

from easyfts.query.nodes import Conjunction, Internal, Node, Terminal, TermForm
from easyfts.query.scanner import Scanner
from easyfts.stopwords import StopWords

# Characters that cannot appear in an unquoted term
PUNCTUATION = "~\"`!@#$%^&*()-+=[]{}\\|;:,.<>?/"

KEYWORDS = {
    "AND": Conjunction.AND,
    "OR": Conjunction.OR,
    "NEAR": Conjunction.NEAR,
}


@dataclass
class _Modifiers:
    """Modifiers applying to the next term, reset once it is consumed."""

    conjunction: Conjunction
    term_form: TermForm = TermForm.INFLECTIONAL
    exclude: bool = False


def parse(
    segment: str,
    default_conjunction: Conjunction = Conjunction.AND,
    stop_words: Iterable[str] | None = None,
) -> Node | None:
    """Parse a search expression into an expression tree.

    Args:
        segment: Search expression, possibly empty or malformed.
        default_conjunction: Conjunction joining terms with no explicit keyword.
        stop_words: Words to leave out, compared case-insensitively.

    Returns:
        Root of the expression tree, or None if nothing usable was found.
    """
    if stop_words is None:
        stop_words = StopWords()
    elif not isinstance(stop_words, StopWords):
        stop_words = StopWords(stop_words)
    return _parse_segment(segment or "", default_conjunction, stop_words)


def _parse_segment(
    segment: str, default_conjunction: Conjunction, stop_words: Container[str]
) -> Node | None:
    scanner = Scanner(segment)
    root: Node | None = None
    modifiers = _Modifiers(default_conjunction)

    while not scanner.end_of_text:
        scanner.move_past_whitespace()
        char = scanner.peek()

        if not scanner.end_of_text and char not in PUNCTUATION:
            term = _read_word(scanner, modifiers)
            keyword = term.upper()
            if keyword in KEYWORDS:
                modifiers.conjunction = KEYWORDS[keyword]
            elif keyword == "NOT":
                modifiers.exclude = True
            else:
                root = _add_term(root, term, modifiers, stop_words)
                modifiers = _Modifiers(default_conjunction)
            # Scanner already sits past the word
            continue

        match char:
            case '"':
                modifiers.term_form = TermForm.LITERAL
                term = scanner.extract_quoted().strip()
                root = _add_term(root, term, modifiers, stop_words)
                modifiers = _Modifiers(default_conjunction)
            case "(":
                block = scanner.extract_block("(", ")")
                node = _parse_segment(block, default_conjunction, stop_words)
                root = _add_node(root, node, modifiers.conjunction, grouped=True)
                modifiers = _Modifiers(default_conjunction)
            case "<":
                block = scanner.extract_block("<", ">")
                node = _parse_segment(block, Conjunction.NEAR, stop_words)
                root = _add_node(root, node, modifiers.conjunction)
                modifiers = _Modifiers(default_conjunction)
            case "-":
                modifiers.exclude = True
            case "+":
                modifiers.term_form = TermForm.LITERAL
            case "~":
                modifiers.term_form = TermForm.THESAURUS
        scanner.move_ahead()

    return root


def _read_word(scanner: Scanner, modifiers: _Modifiers) -> str:
    """Read a bare word, including a trailing wildcard."""
    start = scanner.position
    scanner.move_ahead()
    while (
        not scanner.end_of_text
        and scanner.peek() not in PUNCTUATION
        and not scanner.peek().isspace()
    ):
        scanner.move_ahead()

    if scanner.peek() == "*":
        scanner.move_ahead()
        modifiers.term_form = TermForm.LITERAL

    return scanner.extract(start, scanner.position)


def _add_term(
    root: Node | None, term: str, modifiers: _Modifiers, stop_words: Container[str]
) -> Node | None:
    if not term or term in stop_words:
        return root
    node = Terminal(term, term_form=modifiers.term_form, exclude=modifiers.exclude)
    return _add_node(root, node, modifiers.conjunction)


def _add_node(
    root: Node | None, node: Node | None, conjunction: Conjunction, grouped: bool = False
) -> Node | None:
    """Append a node to the right of the tree."""
    if node is None:
        return root
    node = replace(node, grouped=grouped)
    if root is None:
        return node
    return Internal(root, node, conjunction)
