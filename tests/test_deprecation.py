import logging

import pytest
from monday_client.deprecation import deprecation_message, warn_deprecated


def test_message_with_alternative():
    assert deprecation_message("items", "2.0.0", "items_page") == (
        "[DEPRECATION] `items` is deprecated and will be removed in v2.0.0. "
        "Use `items_page` instead."
    )


def test_message_without_alternative():
    assert deprecation_message("items", "2.0.0") == (
        "[DEPRECATION] `items` is deprecated and will be removed in v2.0.0."
    )


def test_warn_emits_warning_and_log(caplog):
    with caplog.at_level(logging.WARNING, logger="monday_client.deprecation"):
        with pytest.warns(DeprecationWarning, match="items_page"):
            warn_deprecated("items", "2.0.0", "items_page")

    assert any("[DEPRECATION]" in r.getMessage() for r in caplog.records)
