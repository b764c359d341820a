# easyfts/query/renderer.py
from easyfts.query.nodes import Internal, Node, Terminal, TermForm, left_spine


def render(node: Node | None) -> str:
    """Convert an expression tree to SQL Server full-text query syntax."""
    match node:
        case None:
            return ""
        case Terminal(term=t, term_form=form, exclude=exclude):
            prefix = "NOT " if exclude else ""
            return f"{prefix}{_render_term(t, form)}"
        case Internal():
            # Walk the left side in a loop; every grouped level opens before the first term
            spine = left_spine(node)
            parts = ["(" * sum(n.grouped for n in spine), render(spine[-1].left)]
            for internal in reversed(spine):
                parts += [" ", internal.conjunction.keyword, " ", render(internal.right)]
                if internal.grouped:
                    parts.append(")")
            return "".join(parts)
        case _:
            raise TypeError(f"Unsupported query node: {node!r}")


def _render_term(term: str, form: TermForm) -> str:
    match form:
        case TermForm.INFLECTIONAL:
            return f"FORMSOF(INFLECTIONAL, {term})"
        case TermForm.THESAURUS:
            return f"FORMSOF(THESAURUS, {term})"
        case TermForm.LITERAL:
            return f'"{term}"'
