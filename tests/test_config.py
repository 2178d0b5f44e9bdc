from __future__ import annotations

import pytest

from muks.buffer import SyntaxCategory
from muks.config import (
    DEFAULT_THEME,
    EditorConfig,
    EditorMode,
    load_config,
)


def test_defaults_without_environment() -> None:
    config = load_config({})

    assert config.command_capacity == 255
    assert config.status_capacity == 255
    assert config.word_capacity == 31
    assert config.reserved_rows == 2
    assert config.theme == DEFAULT_THEME


def test_capacities_read_from_environment() -> None:
    config = load_config(
        {"MUKS_COMMAND_CAPACITY": "16", "MUKS_STATUS_CAPACITY": "80"}
    )

    assert config.command_capacity == 16
    assert config.status_capacity == 80


@pytest.mark.parametrize("raw", ["abc", "-4", "0", ""])
def test_invalid_capacity_falls_back_to_default(raw: str) -> None:
    config = load_config({"MUKS_COMMAND_CAPACITY": raw})

    assert config.command_capacity == 255


def test_load_config_uses_process_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("MUKS_STATUS_CAPACITY", "42")

    assert load_config().status_capacity == 42


def test_style_for_category() -> None:
    config = EditorConfig()

    assert config.style_for(SyntaxCategory.KEYWORD) == "yellow on black"
    assert config.style_for(SyntaxCategory.COMMENT) == "cyan on black"


def test_mode_labels() -> None:
    assert [mode.label for mode in EditorMode] == ["NORMAL", "INSERT", "COMMAND"]
