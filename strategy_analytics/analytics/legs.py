"""Expiration value and profit/loss of a single leg."""

from ..config.analytics_config import DEFAULT_CONFIG, AnalyticsConfig
from ..models.leg import OptionLeg, StockPosition


def intrinsic_value(option_type: str, strike: float, price: float) -> float:
    """Value per share of an option at expiration.

    Args:
        option_type: 'call' or 'put'
        strike: Strike price
        price: Settlement price of the underlying

    Returns:
        max(0, price - strike) for calls, max(0, strike - price) for puts
    """
    if option_type == 'call':
        return max(0.0, price - strike)
    return max(0.0, strike - price)


def leg_profit_loss(
    leg: OptionLeg,
    price: float,
    config: AnalyticsConfig | None = None,
) -> float:
    """Profit/loss of a leg held to expiration, in dollars.

    Long:  (intrinsic - premium) * multiplier * quantity
    Short: (premium - intrinsic) * multiplier * quantity
    """
    multiplier = (config or DEFAULT_CONFIG).contract_multiplier
    intrinsic = intrinsic_value(leg.option_type, leg.strike, price)

    if leg.is_long:
        return (intrinsic - leg.premium) * multiplier * leg.quantity
    return (leg.premium - intrinsic) * multiplier * leg.quantity


def stock_profit_loss(stock: StockPosition, price: float) -> float:
    """Profit/loss of a share position marked at ``price``."""
    return (price - stock.cost_basis) * stock.shares
