"""Tests for termcells.config -- Unicode edition selection."""

from __future__ import annotations

import logging

import pytest
import wcwidth

from termcells.config import (
    DEFAULT_UNICODE_VERSION,
    UNICODE_VERSION_ENV,
    reset_config_cache,
    unicode_version,
)
from termcells.measure import _measure_cached, measure_text


class TestUnicodeVersion:
    """The table edition comes from the environment."""

    def test_default_when_unset(self) -> None:
        assert unicode_version() == DEFAULT_UNICODE_VERSION

    def test_default_is_shipped_by_wcwidth(self) -> None:
        assert DEFAULT_UNICODE_VERSION in wcwidth.list_versions()

    def test_env_selects_known_version(self, monkeypatch: pytest.MonkeyPatch) -> None:
        oldest = wcwidth.list_versions()[0]
        monkeypatch.setenv(UNICODE_VERSION_ENV, oldest)
        reset_config_cache()
        assert unicode_version() == oldest

    def test_blank_env_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(UNICODE_VERSION_ENV, "   ")
        reset_config_cache()
        assert unicode_version() == DEFAULT_UNICODE_VERSION

    def test_unknown_version_warns_and_falls_back(
        self,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setenv(UNICODE_VERSION_ENV, "0.0.1")
        reset_config_cache()
        with caplog.at_level(logging.WARNING, logger="termcells.config"):
            assert unicode_version() == DEFAULT_UNICODE_VERSION
        assert "Unknown Unicode version '0.0.1'" in caplog.text

    def test_value_is_cached_until_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert unicode_version() == DEFAULT_UNICODE_VERSION
        oldest = wcwidth.list_versions()[0]
        monkeypatch.setenv(UNICODE_VERSION_ENV, oldest)
        assert unicode_version() == DEFAULT_UNICODE_VERSION
        reset_config_cache()
        assert unicode_version() == oldest

    def test_cjk_width_is_stable_across_editions(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(UNICODE_VERSION_ENV, wcwidth.list_versions()[0])
        reset_config_cache()
        assert measure_text("\u4e16\u754c") == 4

    def test_reset_clears_width_cache(self) -> None:
        measure_text("\u4e16\u754c")
        assert _measure_cached.cache_info().currsize > 0
        reset_config_cache()
        assert _measure_cached.cache_info().currsize == 0
