"""Input validation utilities."""

from typing import Optional, Sequence, Union
from pathlib import Path

from .config import ConfigManager, config as default_config
from .exceptions import LogFileError, ValidationError


INVALID_TYPE_MESSAGE = "Please upload an HTML file only (.html or .htm)"
MULTIPLE_FILES_MESSAGE = "Please upload only one file at a time"
NO_FILE_MESSAGE = "No log file selected"


def validate_log_file(
    file_path: Union[str, Path],
    content_type: Optional[str] = None,
    config: Optional[ConfigManager] = None
) -> bool:
    """
    Check that a file looks like a saved HTML log.

    Either the extension or the declared media type is enough.
    """
    config = config or default_config
    suffix = Path(file_path).suffix.lower()
    if suffix in config.get_upload_extensions():
        return True

    if content_type:
        return content_type.split(";")[0].strip().lower() in config.get_upload_media_types()

    return False


def validate_upload(
    file_paths: Sequence[Union[str, Path]],
    content_type: Optional[str] = None,
    config: Optional[ConfigManager] = None
) -> Path:
    """
    Validate a file selection and return the single chosen path.

    Raises:
        ValidationError: no file, more than one file, or not an HTML file
        LogFileError: the file does not exist
    """
    if not file_paths:
        raise ValidationError(NO_FILE_MESSAGE)

    if len(file_paths) > 1:
        raise ValidationError(MULTIPLE_FILES_MESSAGE)

    path = Path(file_paths[0])
    if not validate_log_file(path, content_type, config):
        raise ValidationError(INVALID_TYPE_MESSAGE)

    if not path.is_file():
        raise LogFileError(f"Log file not found: {path}")

    return path
