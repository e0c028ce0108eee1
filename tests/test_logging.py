"""Tests for shared logging helpers."""
import io
import json
import sys
from unittest.mock import Mock
from src.utils.logging import SingleLineLogger, format_exception, log_exception

def test_format_exception_single_line():
    """Test that a traceback is flattened onto one line."""
    try:
        raise ValueError("bad record")
    except ValueError:
        formatted = format_exception(sys.exc_info())

    assert "\n" not in formatted
    assert " | " in formatted
    assert "ValueError: bad record" in formatted

def test_format_exception_without_exception():
    """Test that there is nothing to format outside an except block."""
    assert format_exception((None, None, None)) is None

def test_log_exception_adds_formatted_trace():
    """Test that the helper logs an error with the flattened trace."""
    mock_logger = Mock()

    try:
        raise RuntimeError("store down")
    except RuntimeError:
        log_exception(mock_logger, "Fetch failed", extra={"user_id": "123"})

    mock_logger.error.assert_called_once()
    args, kwargs = mock_logger.error.call_args
    assert args == ("Fetch failed",)
    assert kwargs["extra"]["user_id"] == "123"
    assert "RuntimeError: store down" in kwargs["extra"]["exception"]

def test_single_line_logger_exception_flattens_trace():
    """Test that logger.exception writes the traceback as one JSON field on one line."""
    stream = io.StringIO()
    trace_logger = SingleLineLogger(service="single_line_exception_test", level="INFO", stream=stream)

    try:
        raise ValueError("bad record")
    except ValueError:
        trace_logger.exception("Analysis failed", extra={"user_id": "123"})

    lines = stream.getvalue().strip().splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["message"] == "Analysis failed"
    assert entry["user_id"] == "123"
    assert " | " in entry["exception"]
    assert "ValueError: bad record" in entry["exception"]
