"""
Test Configuration
==================

Pytest fixtures and test configuration for vtc.
"""

import pytest


@pytest.fixture
def f23_98():
    """Provide the 23.98 NTSC non-drop rate."""
    from vtc import rates

    return rates.F23_98


@pytest.fixture
def f24():
    """Provide the 24 fps whole-frame rate."""
    from vtc import rates

    return rates.F24


@pytest.fixture
def f29_97_df():
    """Provide the 29.97 NTSC drop-frame rate."""
    from vtc import rates

    return rates.F29_97_DF


@pytest.fixture
def stamp_1h(f23_98):
    """Provide 01:00:00:00 at 23.98."""
    from vtc.framestamp import Framestamp

    return Framestamp.with_frames("01:00:00:00", f23_98)


@pytest.fixture
def tc(f23_98):
    """Provide a helper building 23.98 framestamps from timecode strings."""
    from vtc.framestamp import Framestamp

    def build(timecode: str, rate=f23_98):
        return Framestamp.with_frames(timecode, rate)

    return build


@pytest.fixture
def clean_env(monkeypatch):
    """Remove vtc environment overrides so config tests start from defaults."""
    for name in (
        "VTC_CONFIG",
        "VTC_DEFAULT_ROUND",
        "VTC_DIVIDE_ROUND",
        "VTC_FILM_FORMAT",
        "VTC_RUNTIME_PRECISION",
        "VTC_INT64_CHECKS",
        "VTC_LOG_LEVEL",
        "VTC_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
