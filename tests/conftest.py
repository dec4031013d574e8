"""Shared fixtures for the EHR log analyzer tests."""

from pathlib import Path

import pytest

from ehr_log_analyzer.core.log_parser import LogParser


SAMPLE_LOG = Path(__file__).parent / "sample_logs" / "ehr_log.html"


def _wrap_entries(*entries):
    rows = "\n".join(
        f'<div class="log-entry {classes}">{text}</div>' for text, classes in entries
    )
    return f"<html><body>{rows}</body></html>"


@pytest.fixture
def make_document():
    """Build a minimal log document from (text, classes) pairs."""
    return _wrap_entries


@pytest.fixture
def sample_log_path():
    return SAMPLE_LOG


@pytest.fixture
def sample_document():
    return SAMPLE_LOG.read_text(encoding="utf-8")


@pytest.fixture
def parser():
    return LogParser()


@pytest.fixture
def sample_result(parser, sample_document):
    return parser.parse_document(sample_document)
