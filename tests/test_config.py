"""Tests for configuration loading and validation."""

import os

import pytest

from proto_modularizer.config import (
    DEFAULT_BUILTIN_PREFIXES,
    ModularizerConfig,
    ScoringConfig,
    load_config,
)
from proto_modularizer.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user and project config files and env vars out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for key in list(os.environ):
        if key.startswith("PROTO_MODULARIZER_"):
            monkeypatch.delenv(key)
    return project


class TestScoringConfig:
    def test_defaults(self):
        scoring = ScoringConfig()
        assert scoring.granularity_weight == 0.35
        assert scoring.cohesion_weight == 0.30
        assert scoring.coupling_weight == 0.25
        assert scoring.build_weight == 0.10
        assert (scoring.sweet_spot_min, scoring.sweet_spot_max) == (3.0, 10.0)

    def test_weights_must_sum_to_one(self):
        with pytest.raises(InvalidConfigError):
            ScoringConfig(granularity_weight=0.9)

    def test_weight_out_of_range(self):
        with pytest.raises(InvalidConfigError):
            ScoringConfig(granularity_weight=-0.1, cohesion_weight=0.75)

    def test_sweet_spot_order(self):
        with pytest.raises(InvalidConfigError):
            ScoringConfig(sweet_spot_min=12.0)

    def test_saturation_positive(self):
        with pytest.raises(InvalidConfigError):
            ScoringConfig(dependency_saturation=0)
        with pytest.raises(InvalidConfigError):
            ScoringConfig(depth_saturation=-1)


class TestModularizerConfig:
    def test_defaults(self):
        config = ModularizerConfig()
        assert config.builtin_prefixes == DEFAULT_BUILTIN_PREFIXES
        assert config.naming_policy == "standard"
        assert config.strip_prefixes == ("com.", "org.", "io.")
        assert config.report_unresolved_imports is True
        assert config.scoring == ScoringConfig()

    def test_invalid_naming_policy(self):
        with pytest.raises(InvalidConfigError):
            ModularizerConfig(naming_policy="camel")

    def test_invalid_verbosity(self):
        with pytest.raises(InvalidConfigError):
            ModularizerConfig(verbosity="loud")

    def test_invalid_max_files(self):
        with pytest.raises(InvalidConfigError):
            ModularizerConfig(max_files=0)

    def test_frozen(self):
        config = ModularizerConfig()
        with pytest.raises(AttributeError):
            config.naming_policy = "full"


class TestLoadConfig:
    def test_defaults(self):
        assert load_config() == ModularizerConfig()

    def test_overrides(self):
        config = load_config(naming_policy="full", max_files=50)
        assert config.naming_policy == "full"
        assert config.max_files == 50

    def test_none_overrides_ignored(self):
        assert load_config(naming_policy=None).naming_policy == "standard"

    def test_verbose_and_quiet_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False, quiet=False).verbosity == "normal"

    def test_explicit_file(self, tmp_path):
        config_file = tmp_path / "custom.toml"
        config_file.write_text(
            'naming_policy = "full"\n'
            'builtin_prefixes = ["google/", "vendor/"]\n'
            "\n"
            "[scoring]\n"
            "sweet_spot_min = 2.0\n"
            "sweet_spot_max = 8.0\n"
        )
        config = load_config(config_file)
        assert config.naming_policy == "full"
        assert config.builtin_prefixes == ("google/", "vendor/")
        assert config.scoring.sweet_spot_min == 2.0
        assert config.scoring.sweet_spot_max == 8.0
        assert config.scoring.granularity_weight == 0.35

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "absent.toml")

    def test_malformed_file(self, tmp_path):
        config_file = tmp_path / "bad.toml"
        config_file.write_text("naming_policy = \n")
        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_unknown_key(self, tmp_path):
        config_file = tmp_path / "unknown.toml"
        config_file.write_text("colour = 'blue'\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_unknown_scoring_key(self, tmp_path):
        config_file = tmp_path / "unknown.toml"
        config_file.write_text("[scoring]\nbonus = 3\n")
        with pytest.raises(ConfigurationError, match="scoring"):
            load_config(config_file)

    def test_project_file_discovered(self, isolated_environment):
        (isolated_environment / "proto-modularizer.toml").write_text("max_files = 7\n")
        assert load_config().max_files == 7

    def test_global_file_below_project_file(self, tmp_path, isolated_environment):
        (tmp_path / "home" / ".proto-modularizer.toml").write_text(
            'max_files = 3\nnaming_policy = "full"\n'
        )
        (isolated_environment / "proto-modularizer.toml").write_text("max_files = 7\n")
        config = load_config()
        assert config.max_files == 7
        assert config.naming_policy == "full"

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("PROTO_MODULARIZER_NAMING_POLICY", "full")
        monkeypatch.setenv("PROTO_MODULARIZER_MAX_FILES", "12")
        monkeypatch.setenv("PROTO_MODULARIZER_REPORT_UNRESOLVED_IMPORTS", "false")
        monkeypatch.setenv("PROTO_MODULARIZER_BUILTIN_PREFIXES", "google/, vendor/")
        config = load_config()
        assert config.naming_policy == "full"
        assert config.max_files == 12
        assert config.report_unresolved_imports is False
        assert config.builtin_prefixes == ("google/", "vendor/")

    def test_overrides_beat_env_vars(self, monkeypatch):
        monkeypatch.setenv("PROTO_MODULARIZER_NAMING_POLICY", "full")
        assert load_config(naming_policy="standard").naming_policy == "standard"

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("PROTO_MODULARIZER_MAX_FILES", "many")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_bad_env_bool(self, monkeypatch):
        monkeypatch.setenv("PROTO_MODULARIZER_REPORT_UNRESOLVED_IMPORTS", "maybe")
        with pytest.raises(InvalidConfigError):
            load_config()
