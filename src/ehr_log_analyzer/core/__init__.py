# Core Processing Module

from .models import (
    Severity,
    LogEntry,
    Player,
    RpcEvent,
    ChatMessage,
    EacReport,
    ParseResult,
)
from .segmenter import EntrySegmenter, entries_from_pairs
from .extractors import (
    Extractor,
    SessionExtractor,
    RpcExtractor,
    ChatExtractor,
    EacReportExtractor,
)
from .log_parser import LogParser, parse_log
from .loader import LogLoader
from .result_view import ResultView

__all__ = [
    "Severity",
    "LogEntry",
    "Player",
    "RpcEvent",
    "ChatMessage",
    "EacReport",
    "ParseResult",
    "EntrySegmenter",
    "entries_from_pairs",
    "Extractor",
    "SessionExtractor",
    "RpcExtractor",
    "ChatExtractor",
    "EacReportExtractor",
    "LogParser",
    "parse_log",
    "LogLoader",
    "ResultView",
]
