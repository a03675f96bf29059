"""Tests for the logging setup."""

import logging

import pytest

from utils.logger import get_logger, resolve_level


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("verbose", logging.INFO), ("", logging.INFO)],
)
def test_resolve_level(name: str, expected: int) -> None:
    assert resolve_level(name) == expected


def test_http_client_loggers_are_quiet() -> None:
    get_logger(__name__)

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
