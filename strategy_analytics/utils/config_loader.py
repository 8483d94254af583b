"""YAML configuration loading."""

import logging
from pathlib import Path
from typing import Tuple

import yaml

from ..config.analytics_config import AnalyticsConfig
from ..scoring.scorer import ScoringConfig
from .error_handling import ConfigurationError

logger = logging.getLogger("strategy_analytics.config_loader")

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default_params.yaml"


def load_config(path: str | Path | None = None) -> Tuple[AnalyticsConfig, ScoringConfig]:
    """Load analytics and scoring configuration from a YAML file.

    Args:
        path: YAML file path. If None, the packaged defaults are used.

    Returns:
        Tuple of (AnalyticsConfig, ScoringConfig)

    Raises:
        ConfigurationError: If the file is missing, unparsable or has invalid values

    Example:
        >>> analytics_config, scoring_config = load_config("my_params.yaml")
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    try:
        with open(config_path) as f:
            params = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {config_path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse {config_path}: {e}") from e

    if not isinstance(params, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {config_path}")

    logger.info("Loaded configuration from %s", config_path)
    return AnalyticsConfig.from_dict(params), ScoringConfig.from_dict(params.get('scoring', {}))
