"""Tests for the display renderer.

WHY: The renderer is what end users see. A malformed stored value must
show the placeholder and leave a log entry, never an exception, while a
misconfigured notation must fail loudly.

HOW: caplog captures the renderer's logger; monkeypatch pins the
configured default notation.
"""

import logging

import pytest

from arithmetic import config
from arithmetic.core.tokens import Notation
from arithmetic.render import CalculatedValue, CalculatedValueRenderer


class TestRender:

    def test_success(self, infix_renderer):
        value = infix_renderer.render("12-(4*3)")
        assert value == CalculatedValue(source="12-(4*3)", result="0", notation="infix")
        assert value.ok

    def test_failure_shows_placeholder(self, infix_renderer):
        value = infix_renderer.render("A+12")
        assert value.result == "Malformed expression."
        assert not value.ok
        assert "A+12" in value.error

    def test_failure_is_logged(self, infix_renderer, caplog):
        with caplog.at_level(logging.ERROR, logger="arithmetic.render"):
            infix_renderer.render("((7+2)*3")
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.ERROR
        assert "((7+2)*3" in caplog.records[0].getMessage()

    def test_success_is_not_logged(self, infix_renderer, caplog):
        with caplog.at_level(logging.DEBUG, logger="arithmetic.render"):
            infix_renderer.render("10+5")
        assert caplog.records == []

    def test_postfix(self, postfix_renderer):
        assert postfix_renderer.render("10 5 3 * +").result == "25"

    def test_custom_placeholder(self):
        renderer = CalculatedValueRenderer(notation="infix", placeholder="n/a")
        assert renderer.render("10++4*").result == "n/a"


class TestViewElements:

    def test_one_value_per_item_in_order(self, postfix_renderer):
        values = postfix_renderer.view_elements(["10 5 +", "A+12", "12 4 + 3 *"])
        assert [v.result for v in values] == ["15", "Malformed expression.", "48"]
        assert [v.ok for v in values] == [True, False, True]

    def test_empty(self, infix_renderer):
        assert infix_renderer.view_elements([]) == []


class TestNotationSetting:

    def test_default_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_NOTATION", "postfix")
        assert CalculatedValueRenderer().notation is Notation.POSTFIX

    def test_default_placeholder_from_config(self, monkeypatch):
        monkeypatch.setattr("arithmetic.render.MALFORMED_PLACEHOLDER", "Bad input")
        assert CalculatedValueRenderer(notation="infix").render("A").result == "Bad input"

    def test_unknown_notation_fails_at_construction(self):
        with pytest.raises(ValueError, match="No notation defined"):
            CalculatedValueRenderer(notation="prefix")

    def test_misconfigured_default_fails(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_NOTATION", "sideways")
        with pytest.raises(ValueError, match="ARITHMETIC_NOTATION"):
            CalculatedValueRenderer()
