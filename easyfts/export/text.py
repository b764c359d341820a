# easyfts/export/text.py
from easyfts.models import ConversionResult

from .base import Exporter


class TextExporter(Exporter):
    """One full-text query per line."""

    name = "text"

    def to_string(self, results: list[ConversionResult]) -> str:
        return "\n".join(r.fts_query for r in results)
