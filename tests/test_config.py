"""Tests for the pydantic configuration models."""

import pytest
from pydantic import ValidationError

from movie_records.config import (
	MaterializerConfig,
	RatingAction,
	ScanConfig,
	Settings,
	ValidationPolicy,
	policy_by_name,
)
from movie_records.errors import ConfigError


def test_strict_defaults():
	policy = ValidationPolicy.strict()
	assert (policy.min_year, policy.max_year) == (1900, 2021)
	assert policy.max_languages == 5
	assert policy.max_language_length == 20
	assert policy.require_brackets is True
	assert policy.language_delimiter == ";"
	assert policy.rating_action == RatingAction.DEFAULT


def test_lenient_preset():
	policy = ValidationPolicy.lenient()
	assert policy.require_brackets is False
	assert policy.language_delimiter == ","


def test_policy_is_frozen():
	policy = ValidationPolicy.strict()
	with pytest.raises(ValidationError):
		policy.max_year = 2030


def test_empty_year_window_rejected():
	with pytest.raises(ValidationError):
		ValidationPolicy(min_year=2000, max_year=1999)


def test_policy_by_name():
	assert policy_by_name("Lenient").name == "lenient"
	with pytest.raises(ConfigError):
		policy_by_name("relaxed")


def test_scan_config_matches():
	scan = ScanConfig()
	assert scan.matches("movies_1.csv")
	assert not scan.matches("movies_1.txt")
	assert not scan.matches("film_1.csv")


@pytest.mark.parametrize("onid", ["", "   ", "a b", "a/b"])
def test_invalid_onid(onid):
	with pytest.raises(ValidationError):
		MaterializerConfig(onid=onid)


def test_materializer_defaults():
	config = MaterializerConfig(onid="clinicke")
	assert config.dir_mode == 0o750
	assert config.file_mode == 0o640
	assert config.directory_name(42) == "clinicke.movies.42"


def test_settings_from_env_and_overrides():
	env = {"MOVIE_RECORDS_ONID": "envuser", "MOVIE_RECORDS_POLICY": "lenient"}
	settings = Settings.from_env(environ=env)
	assert settings.materializer.onid == "envuser"
	assert settings.policy.name == "lenient"

	settings = Settings.from_env(onid="cliuser", policy="strict", environ=env)
	assert settings.materializer.onid == "cliuser"
	assert settings.policy.name == "strict"


def test_settings_from_env_invalid():
	with pytest.raises(ConfigError):
		Settings.from_env(onid="bad id", environ={})
	with pytest.raises(ConfigError):
		Settings.from_env(policy="nope", environ={})
