import io
import logging

from snippet_search.logging_utils import setup_logging


def test_setup_logging_writes_formatted_lines_to_stream():
    buf = io.StringIO()
    setup_logging("INFO", stream=buf)

    logging.getLogger("snippet_search.test").info("hello %s", "there")

    line = buf.getvalue().strip()
    assert line.endswith("| INFO | snippet_search.test | hello there")


def test_setup_logging_replaces_previous_handlers():
    first, second = io.StringIO(), io.StringIO()
    setup_logging("DEBUG", stream=first)
    setup_logging("WARNING", stream=second)

    log = logging.getLogger("snippet_search.test")
    log.info("hidden")
    log.warning("shown")

    assert first.getvalue() == ""
    assert "shown" in second.getvalue()
    assert "hidden" not in second.getvalue()
