"""Analytics configuration and packaged defaults."""

from .analytics_config import DEFAULT_CONFIG, AnalyticsConfig

__all__ = ["AnalyticsConfig", "DEFAULT_CONFIG"]
