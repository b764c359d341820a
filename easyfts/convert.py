# easyfts/convert.py
import logging
from collections.abc import Iterable

from easyfts.models import ConversionResult
from easyfts.query.nodes import Conjunction
from easyfts.query.normalizer import normalize
from easyfts.query.parser import parse
from easyfts.query.renderer import render
from easyfts.stopwords import StopWords, stop_words_from_env

logger = logging.getLogger(__name__)


class FullTextSearch:
    """Converts user-friendly search expressions to full-text queries.

    No exception is raised for badly formed input; the converter builds the
    best valid query it can, which may be an empty string.

    Examples:
        fts = FullTextSearch(stop_words=["the", "a"])
        fts.to_fts_query('abc or "def ghi"')
        # 'FORMSOF(INFLECTIONAL, abc) OR "def ghi"'
    """

    def __init__(self, stop_words: Iterable[str] | None = None) -> None:
        if stop_words is None:
            self.stop_words = stop_words_from_env()
        else:
            self.stop_words = StopWords(stop_words)

    def convert(self, query: str) -> ConversionResult:
        """Convert a search expression and keep the tree it was rendered from."""
        tree = normalize(parse(query, Conjunction.AND, self.stop_words), is_root=True)
        fts_query = render(tree)
        logger.debug("Converted %r to %r", query, fts_query)
        return ConversionResult(query=query, fts_query=fts_query, tree=tree)

    def to_fts_query(self, query: str) -> str:
        """Convert a search expression to a full-text query string."""
        return self.convert(query).fts_query


def to_fts_query(query: str, stop_words: Iterable[str] | None = None) -> str:
    """Convert a search expression using a one-off converter."""
    return FullTextSearch(stop_words).to_fts_query(query)
