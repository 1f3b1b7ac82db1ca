"""
Plugin output formatters.

Stdout of the plugin is either monitoring text (status line plus one line per
device) or a JSON document for scripting.
"""

from abc import ABC, abstractmethod

from ..exceptions import ConfigurationError
from ..services.check_service import CheckResults


class OutputFormatter(ABC):
    """
    Renders CheckResults in the selected output format.

    Design Pattern: Strategy Pattern
    Subclasses provide the text and JSON renderings, this class picks one.
    """

    FORMATS = ("text", "json")

    def __init__(self, output_format: str = "text"):
        """
        Args:
            output_format: 'text' or 'json'

        Raises:
            ConfigurationError: For any other format
        """
        if output_format not in self.FORMATS:
            raise ConfigurationError(f"Unknown output format: {output_format}")
        self.output_format = output_format

    def format(self, results: CheckResults) -> str:
        if self.output_format == "json":
            return self._format_json(results)
        return self._format_text(results)

    @abstractmethod
    def _format_text(self, results: CheckResults) -> str:
        pass

    @abstractmethod
    def _format_json(self, results: CheckResults) -> str:
        pass
