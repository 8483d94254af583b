"""Predefined multi-leg strategy templates.

Each template leg is placed at a dollar offset from spot and priced as a
fraction of a flat base premium, giving a quick starting point that the
caller then edits leg by leg.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..config.analytics_config import AnalyticsConfig
from ..models.leg import MarketContext, OptionLeg
from ..utils.error_handling import InvalidInputError
from ..analytics.greeks import evaluate_legs

logger = logging.getLogger("strategy_analytics.templates")

BASE_PREMIUM = 5.0


@dataclass(frozen=True)
class TemplateLeg:
    option_type: str
    side: str
    strike_offset: float
    premium_ratio: float


@dataclass(frozen=True)
class StrategyTemplate:
    name: str
    description: str
    legs: Tuple[TemplateLeg, ...]


STRATEGY_TEMPLATES: Dict[str, StrategyTemplate] = {
    'long-call': StrategyTemplate(
        name='Long Call',
        description='Bullish strategy with unlimited upside, limited downside',
        legs=(TemplateLeg('call', 'long', 0, 1.0),),
    ),
    'long-put': StrategyTemplate(
        name='Long Put',
        description='Bearish strategy profiting from downward moves',
        legs=(TemplateLeg('put', 'long', 0, 1.0),),
    ),
    'covered-call': StrategyTemplate(
        name='Covered Call',
        description='Income strategy on existing stock position',
        legs=(TemplateLeg('call', 'short', 5, 0.8),),
    ),
    'bull-call-spread': StrategyTemplate(
        name='Bull Call Spread',
        description='Bullish debit spread with defined risk',
        legs=(
            TemplateLeg('call', 'long', 0, 1.0),
            TemplateLeg('call', 'short', 10, 0.5),
        ),
    ),
    'bear-put-spread': StrategyTemplate(
        name='Bear Put Spread',
        description='Bearish debit spread with defined risk',
        legs=(
            TemplateLeg('put', 'long', 0, 1.0),
            TemplateLeg('put', 'short', -10, 0.5),
        ),
    ),
    'straddle': StrategyTemplate(
        name='Long Straddle',
        description='Profits from large moves in either direction',
        legs=(
            TemplateLeg('call', 'long', 0, 1.0),
            TemplateLeg('put', 'long', 0, 1.0),
        ),
    ),
    'strangle': StrategyTemplate(
        name='Long Strangle',
        description='Cheaper than straddle, needs larger move to profit',
        legs=(
            TemplateLeg('call', 'long', 5, 0.7),
            TemplateLeg('put', 'long', -5, 0.7),
        ),
    ),
    'iron-butterfly': StrategyTemplate(
        name='Iron Butterfly',
        description='Max profit if stock expires at short strikes',
        legs=(
            TemplateLeg('put', 'long', -10, 0.3),
            TemplateLeg('put', 'short', 0, 1.0),
            TemplateLeg('call', 'short', 0, 1.0),
            TemplateLeg('call', 'long', 10, 0.3),
        ),
    ),
    'jade-lizard': StrategyTemplate(
        name='Jade Lizard',
        description='No upside risk, collect premium if stock rises',
        legs=(
            TemplateLeg('put', 'short', -5, 0.8),
            TemplateLeg('call', 'short', 5, 0.6),
            TemplateLeg('call', 'long', 10, 0.3),
        ),
    ),
}


def build_template_legs(
    key: str,
    market: MarketContext,
    config: AnalyticsConfig | None = None,
    base_premium: float = BASE_PREMIUM,
) -> List[OptionLeg]:
    """Instantiate a template around the current underlying price.

    Args:
        key: Template key, e.g. 'iron-butterfly'
        market: Market snapshot (strikes are offsets from its underlying price)
        config: Analytics constants for the Greeks estimate
        base_premium: Premium a ratio of 1.0 maps to

    Returns:
        One-contract OptionLegs with Greeks attached

    Raises:
        InvalidInputError: If the template key is unknown
    """
    template = STRATEGY_TEMPLATES.get(key)
    if template is None:
        raise InvalidInputError(f"Unknown strategy template: {key!r}")

    legs = [
        OptionLeg(
            option_type=t.option_type,
            side=t.side,
            strike=market.underlying_price + t.strike_offset,
            premium=base_premium * t.premium_ratio,
            quantity=1,
        )
        for t in template.legs
    ]
    logger.debug("Built template %s with %d legs", template.name, len(legs))
    return evaluate_legs(legs, market, config)
