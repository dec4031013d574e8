"""Splits a saved HTML log document into log entries."""

from typing import Any, Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .models import LogEntry, Severity
from ..utils.config import ConfigManager, config as default_config
from ..utils.exceptions import ConfigurationError, MalformedLogError
from ..utils.logger import get_logger

logger = get_logger("segmenter")


class EntrySegmenter:
    """
    Turns the HTML export of the game client log into LogEntry values.

    Each element carrying the entry class is one entry; its text is the
    element's full text content and its severity comes from its other
    classes. Entries are returned in document order.
    """

    def __init__(self, config: Optional[ConfigManager] = None):
        config = config or default_config
        self.entry_class = config.get_entry_class()
        # Severity -> class name, checked in configured order (fatal first)
        self.severity_classes = []
        for name, css_class in config.get_severity_classes().items():
            try:
                self.severity_classes.append((Severity(name), css_class))
            except ValueError:
                raise ConfigurationError(
                    f"Unknown severity '{name}' in severity_classes; expected fatal or error"
                )

    def segment(self, document: str) -> List[LogEntry]:
        """
        Parse a document into entries.

        Raises:
            MalformedLogError: the input is not an HTML document at all
        """
        if not isinstance(document, str):
            raise MalformedLogError(
                f"Expected document text, got {type(document).__name__}"
            )

        if not document.strip():
            raise MalformedLogError("Log document is empty")

        soup = BeautifulSoup(document, "html.parser")
        if soup.find() is None:
            raise MalformedLogError("Log document contains no HTML markup")

        entries = [
            LogEntry(text=element.get_text(), severity=self._severity_of(element))
            for element in soup.find_all(class_=self.entry_class)
        ]

        logger.debug(f"Segmented document into {len(entries)} entries")
        return entries

    def _severity_of(self, element: Tag) -> Severity:
        classes = element.get("class") or []
        for severity, css_class in self.severity_classes:
            if css_class in classes:
                return severity
        return Severity.NORMAL


def entries_from_pairs(pairs: Iterable[Tuple[str, Any]]) -> List[LogEntry]:
    """Build entries from already split ``(text, severity)`` pairs."""
    return [LogEntry(text=text, severity=Severity.coerce(severity)) for text, severity in pairs]
