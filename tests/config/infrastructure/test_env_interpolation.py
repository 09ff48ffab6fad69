"""Tests for ${ENV_VAR} interpolation helpers."""

import pytest

from toolchat.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_nothing_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOOLCHAT_SET", "1")
        assert collect_missing_vars({"a": "${TOOLCHAT_SET}"}) == []

    def test_walks_nested_structures_without_duplicates(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("TOOLCHAT_NOPE_1", raising=False)
        monkeypatch.delenv("TOOLCHAT_NOPE_2", raising=False)
        data = {
            "a": ["${TOOLCHAT_NOPE_1}", {"b": "x-${TOOLCHAT_NOPE_2}-y"}],
            "c": "${TOOLCHAT_NOPE_1}",
            "d": 3,
        }
        assert collect_missing_vars(data) == ["TOOLCHAT_NOPE_1", "TOOLCHAT_NOPE_2"]

    def test_ignores_non_matching_text(self) -> None:
        assert collect_missing_vars({"a": "$HOME and ${not valid}"}) == []


class TestInterpolate:
    def test_substitutes_recursively(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOOLCHAT_KEY", "k")
        data = {"a": ["Bearer ${TOOLCHAT_KEY}", {"b": "${TOOLCHAT_KEY}"}], "n": 1}
        assert interpolate(data) == {"a": ["Bearer k", {"b": "k"}], "n": 1}

    def test_leaves_scalars_alone(self) -> None:
        assert interpolate(None) is None
        assert interpolate(True) is True
        assert interpolate(2.5) == 2.5


class TestFallbacks:
    """${NAME:-fallback} applies only when NAME is unset."""

    def test_fallback_used_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TOOLCHAT_NOPE_3", raising=False)
        assert interpolate({"cwd": "${TOOLCHAT_NOPE_3:-/srv/files}"}) == {
            "cwd": "/srv/files"
        }

    def test_variable_wins_over_fallback(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TOOLCHAT_DIR", "/home/me")
        assert interpolate("${TOOLCHAT_DIR:-/srv}/data") == "/home/me/data"

    def test_empty_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TOOLCHAT_NOPE_4", raising=False)
        assert interpolate("x${TOOLCHAT_NOPE_4:-}y") == "xy"

    def test_placeholder_with_fallback_is_not_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("TOOLCHAT_NOPE_5", raising=False)
        assert collect_missing_vars(["${TOOLCHAT_NOPE_5:-default}"]) == []


class TestMappingKeys:
    def test_keys_are_left_as_written(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOOLCHAT_KEY", "k")
        data = {"${TOOLCHAT_KEY}": "${TOOLCHAT_KEY}"}
        assert interpolate(data) == {"${TOOLCHAT_KEY}": "k"}

    def test_keys_are_not_reported_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("TOOLCHAT_NOPE_6", raising=False)
        assert collect_missing_vars({"${TOOLCHAT_NOPE_6}": 1}) == []
