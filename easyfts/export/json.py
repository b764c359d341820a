# easyfts/export/json.py
import json

from easyfts.models import ConversionResult

from .base import Exporter


class JsonExporter(Exporter):
    """Export results to JSON, including the normalized expression tree."""

    name = "json"

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_string(self, results: list[ConversionResult]) -> str:
        data = {
            "results": [r.to_dict() for r in results],
            "total": len(results),
            "empty": sum(1 for r in results if r.empty),
        }
        return json.dumps(data, indent=self.indent, ensure_ascii=False)
