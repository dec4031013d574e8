"""Log extraction engine: document text in, ParseResult out."""

from typing import Any, Iterable, List, Optional, Tuple, Union

from .extractors import (
    ChatExtractor,
    EacReportExtractor,
    RpcExtractor,
    SessionExtractor,
)
from .models import LogEntry, ParseResult
from .segmenter import EntrySegmenter, entries_from_pairs
from ..utils.config import ConfigManager
from ..utils.logger import get_logger

logger = get_logger("parser")


class LogParser:
    """
    Single-pass extractor for EHR game client logs.

    The parser keeps no state between calls: every parse builds fresh
    extractors, so parsing the same document twice gives equal results.
    A parse either returns a complete result or raises; partial results are
    never returned.
    """

    def __init__(self, config: Optional[ConfigManager] = None):
        """
        Args:
            config: Configuration used for document segmentation
        """
        self.segmenter = EntrySegmenter(config)

    def parse_document(self, document: str) -> ParseResult:
        """
        Parse the full text of a saved HTML log.

        Raises:
            MalformedLogError: the text is not an HTML document
        """
        entries = self.segmenter.segment(document)
        return self.parse_entries(entries)

    def parse_entries(
        self,
        entries: Iterable[Union[LogEntry, Tuple[str, Any]]]
    ) -> ParseResult:
        """
        Parse already segmented entries.

        Accepts LogEntry values or ``(text, severity)`` pairs.
        """
        entries = self._as_entries(entries)

        sessions = SessionExtractor()
        rpcs = RpcExtractor()
        chats = ChatExtractor()
        eac_reports = EacReportExtractor()
        extractors = (sessions, rpcs, chats, eac_reports)

        for entry in entries:
            for extractor in extractors:
                extractor.feed(entry)

        result = ParseResult(
            players=sessions.results(),
            rpcs=rpcs.results(),
            chats=chats.results(),
            eac_reports=eac_reports.results(),
        )

        logger.info(
            f"Parsed {len(entries)} entries: {len(result.players)} players, "
            f"{len(result.rpcs)} RPC types ({result.total_rpc_calls} calls), "
            f"{len(result.chats)} chat messages, {len(result.eac_reports)} EAC reports"
        )
        return result

    @staticmethod
    def _as_entries(entries: Iterable[Union[LogEntry, Tuple[str, Any]]]) -> List[LogEntry]:
        result: List[LogEntry] = []
        for item in entries:
            if isinstance(item, LogEntry):
                result.append(item)
            else:
                result.extend(entries_from_pairs([item]))
        return result


def parse_log(document: str, config: Optional[ConfigManager] = None) -> ParseResult:
    """Convenience wrapper around ``LogParser(config).parse_document``."""
    return LogParser(config).parse_document(document)
