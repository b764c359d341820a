# easyfts/__init__.py
"""easyfts - Google-like search expressions to SQL Server full-text queries."""

from easyfts.convert import FullTextSearch, to_fts_query
from easyfts.models import ConversionResult
from easyfts.query import (
    Conjunction,
    Internal,
    Node,
    Scanner,
    Terminal,
    TermForm,
    normalize,
    parse,
    render,
)
from easyfts.stopwords import StopWords, load_stop_words

__all__ = [
    # Conversion
    "FullTextSearch",
    "to_fts_query",
    "ConversionResult",
    # Expression tree
    "Node",
    "Terminal",
    "Internal",
    "TermForm",
    "Conjunction",
    "Scanner",
    "parse",
    "normalize",
    "render",
    # Configuration
    "StopWords",
    "load_stop_words",
]
