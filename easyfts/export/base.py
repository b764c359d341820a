# easyfts/export/base.py
"""Base class for conversion result exporters."""

from abc import ABC, abstractmethod
from pathlib import Path

from easyfts.models import ConversionResult


class Exporter(ABC):
    """Base class for conversion result exporters."""

    name: str

    @abstractmethod
    def to_string(self, results: list[ConversionResult]) -> str:
        """Serialize conversion results to a string."""
        ...

    def export(self, results: list[ConversionResult], path: Path) -> None:
        path.write_text(self.to_string(results), encoding="utf-8")
