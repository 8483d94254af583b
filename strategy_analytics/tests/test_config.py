"""Tests for analytics configuration and YAML loading."""

import pytest

from strategy_analytics.config.analytics_config import AnalyticsConfig
from strategy_analytics.scoring.scorer import ScoringConfig
from strategy_analytics.utils.config_loader import DEFAULT_CONFIG_PATH, load_config
from strategy_analytics.utils.error_handling import ConfigurationError


class TestAnalyticsConfig:
    """Test suite for AnalyticsConfig."""

    def test_defaults(self):
        config = AnalyticsConfig()

        assert config.volatility == 0.25
        assert config.contract_multiplier == 100
        assert config.days_per_year == 365.0
        assert config.direction_threshold == 0.1
        assert config.curve_points == 101

    def test_ranges(self):
        config = AnalyticsConfig()

        assert config.default_range.pct == 0.25
        assert config.condor_range.pct == 0.15
        assert config.pmcc_range.pct == 0.30
        assert config.default_range.points == 101

    def test_from_dict(self):
        config = AnalyticsConfig.from_dict({
            'greeks': {'volatility': 0.4, 'direction_threshold': 0.2},
            'contracts': {'multiplier': 10},
            'payoff': {'points': 51},
        })

        assert config.volatility == 0.4
        assert config.direction_threshold == 0.2
        assert config.contract_multiplier == 10
        assert config.curve_points == 51
        assert config.sweep_pct == 0.25

    def test_from_empty_dict(self):
        assert AnalyticsConfig.from_dict({}).volatility == 0.25

    @pytest.mark.parametrize("kwargs", [
        {'volatility': 0},
        {'contract_multiplier': -1},
        {'days_per_year': 0},
        {'direction_threshold': -0.1},
        {'sweep_pct': 1.5},
        {'condor_sweep_pct': 0},
        {'curve_points': 1},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ConfigurationError):
            AnalyticsConfig(**kwargs)


class TestLoadConfig:
    """Test suite for load_config."""

    def test_packaged_defaults(self):
        analytics_config, scoring_config = load_config()

        assert DEFAULT_CONFIG_PATH.exists()
        assert analytics_config.volatility == 0.25
        assert analytics_config.condor_sweep_pct == 0.15
        assert isinstance(scoring_config, ScoringConfig)
        assert scoring_config.return_cap == 30
        assert scoring_config.excellent_threshold == 75

    def test_custom_file(self, tmp_path):
        path = tmp_path / "params.yaml"
        path.write_text(
            "greeks:\n"
            "  volatility: 0.35\n"
            "scoring:\n"
            "  tiers:\n"
            "    excellent: 80\n"
            "    good: 60\n"
        )

        analytics_config, scoring_config = load_config(path)

        assert analytics_config.volatility == 0.35
        assert scoring_config.excellent_threshold == 80
        assert scoring_config.good_threshold == 60

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        analytics_config, _ = load_config(str(path))
        assert analytics_config.curve_points == 101

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_malformed_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("greeks: [unclosed\n")

        with pytest.raises(ConfigurationError, match="parse"):
            load_config(path)

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "params.yaml"
        path.write_text("greeks:\n  volatility: -1\n")

        with pytest.raises(ConfigurationError):
            load_config(path)
