"""Tests for copier configuration."""

import pytest
from pydantic import ValidationError

from propcopy import CopierSettings


def test_defaults():
    settings = CopierSettings(_env_file=None)
    assert settings.max_depth is None
    assert settings.warn_on_skip is False
    assert settings.include_properties is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PROPCOPY_MAX_DEPTH", "8")
    monkeypatch.setenv("PROPCOPY_WARN_ON_SKIP", "true")
    monkeypatch.setenv("PROPCOPY_INCLUDE_PROPERTIES", "false")

    settings = CopierSettings(_env_file=None)

    assert settings.max_depth == 8
    assert settings.warn_on_skip is True
    assert settings.include_properties is False


def test_negative_depth_rejected():
    with pytest.raises(ValidationError):
        CopierSettings(_env_file=None, max_depth=-1)


def test_settings_are_frozen():
    settings = CopierSettings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.max_depth = 3
