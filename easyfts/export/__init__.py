# easyfts/export/__init__.py
from .base import Exporter
from .json import JsonExporter
from .text import TextExporter

EXPORTERS: dict[str, type[Exporter]] = {cls.name: cls for cls in (TextExporter, JsonExporter)}


def get_exporter(name: str) -> Exporter:
    """Return an exporter instance by format name."""
    try:
        return EXPORTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown format: {name}. Available: {list(EXPORTERS)}") from None


__all__ = ["Exporter", "JsonExporter", "TextExporter", "get_exporter"]
