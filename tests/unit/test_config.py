"""
Unit tests for configuration and logging utilities.
"""

import logging
from pathlib import Path

import pytest

from cryptovol.estimators import DVOLConfig
from cryptovol.types import DVOLMethod, GARCHParams
from cryptovol.utils import (
    ConfigError,
    load_config,
    setup_logging,
    setup_logging_from_config,
    validate_config,
)

REPO_CONFIG = Path(__file__).resolve().parents[2] / 'config.yaml'


class TestLoadConfig:
    """Tests for YAML config loading."""

    def test_repo_config_matches_defaults(self):
        """The shipped config.yaml reproduces the built-in defaults."""
        config = load_config(str(REPO_CONFIG))
        validate_config(config, ['dvol', 'logging'])
        assert DVOLConfig.from_dict(config['dvol']) == DVOLConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / 'nope.yaml'))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text("dvol: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        assert load_config(str(path)) == {}

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_validate_config_missing_keys(self):
        with pytest.raises(ConfigError, match="dvol"):
            validate_config({'logging': {}}, ['dvol'])


class TestDVOLConfig:
    """Tests for DVOLConfig construction."""

    def test_defaults(self):
        config = DVOLConfig()
        assert config.method is DVOLMethod.EWMA
        assert config.window_size == 30
        assert config.ewma_lambda == 0.94
        assert config.garch_params == GARCHParams(omega=1e-6, alpha=0.1, beta=0.85)
        assert config.annualization_factor == 365

    def test_from_dict_overrides(self):
        config = DVOLConfig.from_dict({
            'method': 'garch',
            'window_size': 14,
            'garch': {'omega': 2e-6, 'alpha': 0.05, 'beta': 0.9},
        })
        assert config.method is DVOLMethod.GARCH
        assert config.window_size == 14
        assert config.ewma_lambda == 0.94
        assert config.garch_params == GARCHParams(omega=2e-6, alpha=0.05, beta=0.9)

    def test_from_dict_empty(self):
        assert DVOLConfig.from_dict(None) == DVOLConfig()
        assert DVOLConfig.from_dict({}) == DVOLConfig()

    def test_unknown_keys(self):
        with pytest.raises(ConfigError, match="lamda"):
            DVOLConfig.from_dict({'lamda': 0.9})

    def test_bad_garch_section(self):
        with pytest.raises(ConfigError):
            DVOLConfig.from_dict({'garch': {'gamma': 0.1}})
        with pytest.raises(ConfigError):
            DVOLConfig.from_dict({'garch': 0.1})

    def test_bad_garch_params_mapping(self):
        with pytest.raises(ConfigError, match="garch_params"):
            DVOLConfig.from_dict({'garch_params': {'gamma': 0.1}})
        with pytest.raises(ConfigError, match="garch_params"):
            DVOLConfig.from_dict({'garch_params': {'omega': 'tiny'}})

    def test_garch_params_mapping(self):
        config = DVOLConfig.from_dict({'garch_params': {'omega': 3e-6, 'beta': 0.8}})
        assert config.garch_params == GARCHParams(omega=3e-6, alpha=0.1, beta=0.8)

    def test_round_trip_through_dict(self):
        config = DVOLConfig(window_size=20, ewma_lambda=0.97)
        assert DVOLConfig.from_dict(config.to_dict()) == config

    def test_with_overrides(self):
        config = DVOLConfig().with_overrides(window_size=5)
        assert config.window_size == 5
        assert DVOLConfig().window_size == 30


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / 'logs' / 'cryptovol.log'
        logger = setup_logging(log_file=str(log_file), log_level='DEBUG', console=False)

        logging.getLogger('cryptovol.estimators.base').debug("hello from estimator")

        assert len(logger.handlers) == 1
        text = log_file.read_text()
        assert "hello from estimator" in text
        assert "DEBUG cryptovol.estimators.base:" in text
        setup_logging(console=False)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(console=True)
        logger = setup_logging(console=True)
        assert len(logger.handlers) == 1
        setup_logging(console=False)

    def test_from_config(self):
        logger = setup_logging_from_config({'logging': {'level': 'warning', 'console': False}})
        assert logger.level == logging.WARNING
        assert logger.handlers == []
        setup_logging(console=False)
