"""Strategy templates."""

from .templates import STRATEGY_TEMPLATES, build_template_legs

__all__ = ["STRATEGY_TEMPLATES", "build_template_legs"]
