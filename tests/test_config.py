"""Tests for environment-driven configuration."""

import pytest

from tilegrid import Config


def test_defaults_validate():
    Config.validate()


def test_display_lists_settings(monkeypatch):
    monkeypatch.setattr(Config, "MAX_SEARCH_STEPS", 0)
    text = Config.display()
    assert text.startswith("tilegrid Configuration:")
    assert "Search Budget: unlimited" in text

    monkeypatch.setattr(Config, "MAX_SEARCH_STEPS", 500)
    assert "Search Budget: 500" in Config.display()


@pytest.mark.parametrize(
    "attribute,value,fragment",
    [
        ("MAX_SEARCH_STEPS", -1, "TILEGRID_MAX_SEARCH_STEPS"),
        ("ON_BUDGET_EXHAUSTED", "ignore", "TILEGRID_ON_BUDGET_EXHAUSTED"),
        ("DEFAULT_HEURISTIC", "taxicab", "TILEGRID_DEFAULT_HEURISTIC"),
    ],
)
def test_validate_rejects_bad_values(monkeypatch, attribute, value, fragment):
    monkeypatch.setattr(Config, attribute, value)
    with pytest.raises(ValueError) as excinfo:
        Config.validate()
    assert fragment in str(excinfo.value)
