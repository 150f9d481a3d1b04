"""Tests for option loading."""

import logging
from dataclasses import dataclass

from tanglelab.config import configure_logging, load_options


@dataclass
class Opts:
    size: int = 3
    color: str = "black"


def test_defaults():
    assert load_options(Opts) == Opts()


def test_overrides_win():
    assert load_options(Opts, {"size": 5}, size=7) == Opts(size=7)


def test_unknown_keys_are_logged_and_dropped(caplog):
    with caplog.at_level(logging.WARNING, logger="tanglelab.config"):
        opts = load_options(Opts, {"size": 4, "colour": "red"})
    assert opts == Opts(size=4)
    assert "'colour'" in caplog.text
    assert "Opts" in caplog.text


def test_configure_logging_accepts_names():
    configure_logging("debug")
    configure_logging("no-such-level")
