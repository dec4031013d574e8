"""Custom exceptions for the EHR log analyzer."""


class LogAnalyzerError(Exception):
    """Base exception for log analyzer."""
    pass


class ConfigurationError(LogAnalyzerError):
    """Raised when configuration is invalid or missing."""
    pass


class LogFileError(LogAnalyzerError):
    """Raised when log file cannot be read or processed."""
    pass


class MalformedLogError(LogFileError):
    """Raised when a document cannot be segmented into log entries."""
    pass


class ValidationError(LogAnalyzerError):
    """Raised when input validation fails."""
    pass


class ExportError(LogAnalyzerError):
    """Raised when a table cannot be exported."""
    pass
