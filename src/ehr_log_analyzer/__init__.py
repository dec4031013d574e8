"""EHR Log Analyzer - extracts players, RPCs, chat and EAC reports from EHR HTML logs."""

__version__ = "0.1.0"

from .core import LogParser, ParseResult

__all__ = ["LogParser", "ParseResult", "__version__"]
