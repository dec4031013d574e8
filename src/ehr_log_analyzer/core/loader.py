"""Reads a saved log file from disk and hands its text to the parser."""

from pathlib import Path
from typing import Optional, Sequence, Union

from .log_parser import LogParser
from .models import ParseResult
from ..utils.config import ConfigManager, config as default_config
from ..utils.exceptions import LogFileError, MalformedLogError
from ..utils.validators import validate_upload
from ..utils.logger import get_logger

logger = get_logger("loader")


INVALID_LOG_MESSAGE = "Error parsing log file. Please ensure it's a valid EHR log file."


class LogLoader:
    """
    Validates a selected log file, reads it and parses it.

    File I/O lives here so the parser itself stays pure.
    """

    def __init__(self, config: Optional[ConfigManager] = None):
        self.config = config or default_config
        self.parser = LogParser(self.config)

    def read_text(self, file_path: Union[str, Path]) -> str:
        """Decode the whole file; undecodable bytes are replaced rather than fatal."""
        path = Path(file_path)
        try:
            text = path.read_text(encoding=self.config.get_encoding(), errors="replace")
        except OSError as e:
            raise LogFileError(f"Error reading log file {path}: {e}")

        logger.debug(f"Read {len(text)} characters from {path}")
        return text

    def load(self, file_path: Union[str, Path], content_type: Optional[str] = None) -> ParseResult:
        """Validate, read and parse a single log file."""
        return self.load_selection([file_path], content_type)

    def load_selection(
        self,
        file_paths: Sequence[Union[str, Path]],
        content_type: Optional[str] = None
    ) -> ParseResult:
        """
        Load a user's file selection, which must be exactly one HTML file.

        Raises:
            ValidationError: empty or multi-file selection, or not an HTML file
            LogFileError: the file cannot be read
            MalformedLogError: the file is not a log document
        """
        path = validate_upload(file_paths, content_type, self.config)
        logger.info(f"Loading log file {path}")

        text = self.read_text(path)
        try:
            return self.parser.parse_document(text)
        except MalformedLogError as e:
            logger.error(f"Error parsing log file {path}: {e}")
            raise MalformedLogError(INVALID_LOG_MESSAGE) from e
