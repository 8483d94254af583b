"""Error handling utilities.

The analytics core never raises on numeric input. Division sites go through
``safe_divide`` so a zero denominator yields a sentinel instead of Infinity,
and callers can pre-check records with the validators below.
"""

import logging
import math
from typing import Any, Tuple

logger = logging.getLogger("strategy_analytics.error_handling")


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Safely divide two numbers, returning default on division by zero.

    Args:
        numerator: Numerator value
        denominator: Denominator value
        default: Value to return if denominator is zero

    Returns:
        Result of division, or default if denominator is zero

    Example:
        >>> safe_divide(10, 2)
        5.0
        >>> safe_divide(200, 0)
        0.0
    """
    if denominator == 0:
        logger.debug("Division by zero: %s/%s, returning %s", numerator, denominator, default)
        return default
    return numerator / denominator


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def validate_leg(leg: Any) -> Tuple[bool, str]:
    """Check an option leg before handing it to the analytics core.

    Args:
        leg: OptionLeg (or any object with the same attributes)

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> is_valid, error = validate_leg(leg)
        >>> if not is_valid:
        >>>     logger.warning("Rejected leg: %s", error)
    """
    if getattr(leg, "option_type", None) not in ("call", "put"):
        return False, f"Invalid option type: {getattr(leg, 'option_type', None)}"

    if getattr(leg, "side", None) not in ("long", "short"):
        return False, f"Invalid leg side: {getattr(leg, 'side', None)}"

    strike = getattr(leg, "strike", None)
    if not _is_finite_number(strike) or strike <= 0:
        return False, f"Invalid strike price: {strike}"

    premium = getattr(leg, "premium", None)
    if not _is_finite_number(premium) or premium < 0:
        return False, f"Invalid premium: {premium}"

    quantity = getattr(leg, "quantity", None)
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
        return False, f"Quantity must be a positive integer, got: {quantity}"

    return True, ""


def validate_market(market: Any) -> Tuple[bool, str]:
    """Check a market snapshot before handing it to the analytics core.

    Args:
        market: MarketContext (or any object with the same attributes)

    Returns:
        Tuple of (is_valid, error_message)
    """
    price = getattr(market, "underlying_price", None)
    if not _is_finite_number(price) or price <= 0:
        return False, f"Invalid underlying price: {price}"

    dte = getattr(market, "days_to_expiry", None)
    if not isinstance(dte, int) or isinstance(dte, bool) or dte < 0:
        return False, f"Days to expiry must be a non-negative integer, got: {dte}"

    vol = getattr(market, "volatility", None)
    if vol is not None and (not _is_finite_number(vol) or vol <= 0):
        return False, f"Invalid volatility: {vol}"

    return True, ""


class AnalyticsError(Exception):
    """Base exception for strategy analytics errors."""
    pass


class InvalidInputError(ValueError, AnalyticsError):
    """Raised for structurally invalid input (unknown leg type, shape or template).

    Inherits from ValueError so callers can catch it generically.
    """
    pass


class ConfigurationError(AnalyticsError):
    """Raised when configuration is invalid."""
    pass
