import logging
import sys

from monday_client.errors import ComplexityError, InvalidRequestError
from monday_client.logging import LogfmtFormatter, setup_logging


def _record(msg="op.request", **extra):
    record = logging.LogRecord(
        name="monday_client.client",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_includes_known_extras():
    line = LogfmtFormatter().format(
        _record(operation="board.query", status=200, success=True, duration_ms=12)
    )

    assert line == (
        "level=debug logger=monday_client.client event=op.request "
        "operation=board.query status=200 success=true duration_ms=12"
    )


def test_logfmt_quotes_values_with_spaces():
    line = LogfmtFormatter().format(_record(msg="request failed", error_code="a b"))
    assert 'event="request failed"' in line
    assert 'error_code="a b"' in line


def test_setup_logging_is_idempotent():
    setup_logging("debug")
    setup_logging("debug")

    log = logging.getLogger("monday_client")
    assert len(log.handlers) == 1
    assert isinstance(log.handlers[0].formatter, LogfmtFormatter)
    assert log.level == logging.DEBUG

    log.removeHandler(log.handlers[0])
    log.setLevel(logging.NOTSET)


def test_logfmt_adds_monday_error_details():
    try:
        raise ComplexityError("ComplexityException", code=429)
    except ComplexityError:
        record = _record(msg="request failed", operation="board.query")
        record.exc_info = sys.exc_info()

    line = LogfmtFormatter().format(record)

    assert line.endswith(
        "operation=board.query exc_type=ComplexityError "
        "error_kind=rate_limited error_code=429"
    )


def test_logfmt_keeps_explicit_error_code_extra():
    try:
        raise InvalidRequestError("InvalidBoardIdException", code=400)
    except InvalidRequestError:
        record = _record(error_code="InvalidBoardIdException")
        record.exc_info = sys.exc_info()

    line = LogfmtFormatter().format(record)

    assert "error_code=InvalidBoardIdException" in line
    assert "error_code=400" not in line
    assert "error_kind=invalid_request" in line
