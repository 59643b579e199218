"""Tests for configuration loading."""

import os

import pytest

from whspr.config import Config
from whspr.exceptions import ConfigurationError
from whspr.models.store import DEFAULT_BASE_URL, DEFAULT_CHUNK_SIZE, ModelAcquirer

ENV_VARS = ["WHSPR_CACHE_DIR", "WHSPR_BASE_URL", "WHSPR_TIMEOUT", "WHSPR_CHUNK_SIZE", "WHSPR_LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # Values loaded from .env files land in this copy, not the real environment
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # Keep load_dotenv from picking up a stray .env in the working directory
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestConfig:
    """Test Config defaults and environment loading."""

    def test_defaults(self, clean_env):
        config = Config.from_env()
        assert config.cache_dir is None
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout is None
        assert config.chunk_size == DEFAULT_CHUNK_SIZE
        assert config.log_level == "INFO"

    def test_from_env(self, clean_env, tmp_path):
        clean_env.setenv("WHSPR_CACHE_DIR", str(tmp_path / "models"))
        clean_env.setenv("WHSPR_BASE_URL", "https://mirror.example/whisper/")
        clean_env.setenv("WHSPR_TIMEOUT", "30")
        clean_env.setenv("WHSPR_CHUNK_SIZE", "65536")
        clean_env.setenv("WHSPR_LOG_LEVEL", "debug")

        config = Config.from_env()

        assert config.cache_dir == str(tmp_path / "models")
        assert config.base_url == "https://mirror.example/whisper"
        assert config.timeout == 30.0
        assert config.chunk_size == 65536
        assert config.log_level == "DEBUG"

    def test_from_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("WHSPR_CHUNK_SIZE=2048\n")
        config = Config.from_env(str(env_file))
        assert config.chunk_size == 2048

    def test_invalid_number(self, clean_env):
        clean_env.setenv("WHSPR_CHUNK_SIZE", "lots")
        with pytest.raises(ConfigurationError):
            Config.from_env()

    def test_non_positive_chunk_size(self):
        with pytest.raises(ConfigurationError):
            Config(chunk_size=0)

    def test_non_positive_timeout(self):
        with pytest.raises(ConfigurationError):
            Config(timeout=-1)

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"chunk_size": 1024, "colour": "blue"})
        assert config.chunk_size == 1024

    def test_from_dict_coerces_strings(self):
        config = Config.from_dict({"chunk_size": "1024", "timeout": "2.5"})
        assert config.chunk_size == 1024
        assert config.timeout == 2.5

    @pytest.mark.parametrize("values", [{"chunk_size": "lots"}, {"timeout": "soon"}, {"chunk_size": None}])
    def test_from_dict_rejects_non_numeric(self, values):
        with pytest.raises(ConfigurationError):
            Config.from_dict(values)

    def test_acquirer_from_config(self, tmp_path):
        config = Config(cache_dir=str(tmp_path), base_url="https://host.example", timeout=5)
        acquirer = ModelAcquirer.from_config(config)
        assert acquirer.cache_dir == tmp_path
        assert acquirer.timeout == 5
        assert acquirer.model_url("tiny") == "https://host.example/ggml-tiny.bin"


class TestPackageExports:
    """Test the top-level public API."""

    def test_all_names_resolve(self):
        import whspr
        for name in whspr.__all__:
            assert hasattr(whspr, name), name

    def test_error_hierarchy(self):
        from whspr import exceptions
        assert issubclass(exceptions.ConfigurationError, exceptions.WhsprError)
        assert not hasattr(exceptions, "ConfigError")
