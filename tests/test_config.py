"""
Configuration Tests
===================

Tests for YAML loading, environment overrides and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from vtc import config
from vtc.config import Settings, load_config, setup_logging
from vtc.film_format import FilmFormat
from vtc.framestamp import Framestamp
from vtc.rational import Round


class TestLoadConfig:
    """Tests for loading settings."""

    def test_defaults(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        settings = load_config()
        assert settings.framestamp.default_round is Round.CLOSEST
        assert settings.framestamp.divide_round is Round.TRUNC
        assert settings.framestamp.film_format is FilmFormat.FF35MM_4PERF
        assert settings.framestamp.runtime_precision == 9
        assert settings.codec.enforce_int64 is True
        assert settings.logging.format == "json"

    def test_yaml_file(self, clean_env, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(
            "framestamp:\n"
            "  default_round: floor\n"
            "  film_format: ff16mm\n"
            "codec:\n"
            "  enforce_int64: false\n"
        )
        settings = load_config(str(path))
        assert settings.framestamp.default_round is Round.FLOOR
        assert settings.framestamp.film_format is FilmFormat.FF16MM
        assert settings.codec.enforce_int64 is False

    def test_searches_working_directory(self, clean_env, tmp_path):
        (tmp_path / "vtc.yml").write_text("framestamp:\n  runtime_precision: 3\n")
        clean_env.chdir(tmp_path)
        assert load_config().framestamp.runtime_precision == 3

    def test_config_env_path(self, clean_env, tmp_path):
        path = tmp_path / "elsewhere.yaml"
        path.write_text("logging:\n  level: DEBUG\n")
        clean_env.setenv("VTC_CONFIG", str(path))
        assert load_config().logging.level == "DEBUG"

    def test_empty_file(self, clean_env, tmp_path):
        path = tmp_path / "vtc.yaml"
        path.write_text("")
        assert load_config(str(path)) == Settings()

    def test_env_overrides_file(self, clean_env, tmp_path):
        path = tmp_path / "vtc.yaml"
        path.write_text("framestamp:\n  default_round: floor\n")
        clean_env.setenv("VTC_DEFAULT_ROUND", "CEIL")
        clean_env.setenv("VTC_DIVIDE_ROUND", "closest")
        clean_env.setenv("VTC_FILM_FORMAT", "FF35MM_2PERF")
        clean_env.setenv("VTC_RUNTIME_PRECISION", "4")
        clean_env.setenv("VTC_INT64_CHECKS", "off")
        clean_env.setenv("VTC_LOG_FORMAT", "text")

        settings = load_config(str(path))
        assert settings.framestamp.default_round is Round.CEIL
        assert settings.framestamp.divide_round is Round.CLOSEST
        assert settings.framestamp.film_format is FilmFormat.FF35MM_2PERF
        assert settings.framestamp.runtime_precision == 4
        assert settings.codec.enforce_int64 is False
        assert settings.logging.format == "text"

    def test_precision_bounds(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        clean_env.setenv("VTC_RUNTIME_PRECISION", "31")
        with pytest.raises(ValidationError):
            load_config()

    @pytest.mark.parametrize("key", ["default_round", "divide_round"])
    def test_off_round_rejected_in_file(self, clean_env, tmp_path, key):
        """Defaults that could not produce whole frames are refused."""
        path = tmp_path / "vtc.yaml"
        path.write_text(f"framestamp:\n  {key}: 'off'\n")
        with pytest.raises(ValidationError):
            load_config(str(path))

    @pytest.mark.parametrize("env_var", ["VTC_DEFAULT_ROUND", "VTC_DIVIDE_ROUND"])
    def test_off_round_rejected_in_env(self, clean_env, tmp_path, env_var):
        clean_env.chdir(tmp_path)
        clean_env.setenv(env_var, "OFF")
        with pytest.raises(ValidationError):
            load_config()

    def test_bad_round(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        clean_env.setenv("VTC_DEFAULT_ROUND", "sideways")
        with pytest.raises(ValidationError):
            load_config()


class TestSettingsDefaults:
    """Tests for library functions reading defaults from settings."""

    def test_default_round(self, f24, monkeypatch):
        monkeypatch.setattr(config.settings.framestamp, "default_round", Round.FLOOR)
        assert Framestamp.with_seconds(0.99, f24).frames() == 23

    def test_runtime_precision(self, stamp_1h, monkeypatch):
        monkeypatch.setattr(config.settings.framestamp, "runtime_precision", 0)
        assert stamp_1h.runtime() == "01:00:04.0"

    def test_film_format(self, stamp_1h, monkeypatch):
        monkeypatch.setattr(config.settings.framestamp, "film_format", FilmFormat.FF16MM)
        assert str(stamp_1h.feet_and_frames()) == "4320+00"

    def test_explicit_option_wins(self, f24, monkeypatch):
        monkeypatch.setattr(config.settings.framestamp, "default_round", Round.FLOOR)
        assert Framestamp.with_seconds(0.99, f24, round=Round.CLOSEST).frames() == 24


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_sets_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        settings = Settings.model_validate({"logging": {"level": "debug", "format": "text"}})
        setup_logging(settings)

        assert calls[0]["level"] == logging.DEBUG
        assert calls[0]["format"] == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def test_json_format(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        setup_logging(Settings())

        assert calls[0]["level"] == logging.INFO
        assert calls[0]["format"].startswith('{"time"')
