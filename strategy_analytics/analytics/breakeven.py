"""Breakeven prices and the delta-based probability-of-profit proxy.

Each strategy shape has its own closed-form breakeven. ``solve_breakeven``
dispatches on a ``StrategyShape`` tag so the per-shape formulas stay isolated.

Formulas assume the strike ordering each shape intends (for a condor,
short put below short call); nothing here checks it.
"""

import inspect
import logging
from enum import Enum
from typing import Callable, Dict, List, Sequence

from ..config.analytics_config import DEFAULT_CONFIG
from ..models.metrics import BreakevenRange
from ..models.payoff import PayoffPoint
from ..utils.error_handling import InvalidInputError, safe_divide

logger = logging.getLogger("strategy_analytics.breakeven")


class StrategyShape(str, Enum):
    """Strategy shapes with a closed-form breakeven."""

    VERTICAL_CREDIT = "verticalCredit"
    CONDOR = "condor"
    SINGLE_PUT = "singlePut"
    SINGLE_CALL = "singleCall"
    PMCC = "pmcc"


def credit_per_share(net_credit: float, contracts: int, multiplier: int | None = None) -> float:
    """Net credit in dollars converted back to per-share terms.

    Zero contracts gives 0.0 rather than Infinity.
    """
    multiplier = multiplier or DEFAULT_CONFIG.contract_multiplier
    return safe_divide(net_credit, multiplier * contracts)


def vertical_credit_breakeven(
    short_strike: float,
    net_credit: float,
    contracts: int = 1,
    option_type: str = 'put',
) -> float:
    """Breakeven of a single credit vertical (bull put or bear call)."""
    offset = credit_per_share(net_credit, contracts)
    if option_type == 'call':
        return short_strike + offset
    return short_strike - offset


def condor_breakeven(
    short_put_strike: float,
    short_call_strike: float,
    net_credit: float,
    contracts: int = 1,
) -> BreakevenRange:
    """Lower and upper breakeven of an iron condor."""
    offset = credit_per_share(net_credit, contracts)
    return BreakevenRange(lower=short_put_strike - offset, upper=short_call_strike + offset)


def cash_secured_put_breakeven(strike: float, premium: float) -> float:
    return strike - premium


def covered_call_breakeven(underlying_price: float, premium: float) -> float:
    """Shares bought at the current price, lowered by the call premium."""
    return underlying_price - premium


def pmcc_breakeven(leaps_strike: float, leaps_premium: float, short_premium: float) -> float:
    return leaps_strike + leaps_premium - short_premium


_SOLVERS: Dict[StrategyShape, Callable[..., float | BreakevenRange]] = {
    StrategyShape.VERTICAL_CREDIT: vertical_credit_breakeven,
    StrategyShape.CONDOR: condor_breakeven,
    StrategyShape.SINGLE_PUT: cash_secured_put_breakeven,
    StrategyShape.SINGLE_CALL: covered_call_breakeven,
    StrategyShape.PMCC: pmcc_breakeven,
}


def solve_breakeven(shape: StrategyShape | str, **params: float) -> float | BreakevenRange:
    """Compute the breakeven for a strategy shape.

    Args:
        shape: StrategyShape member or its string value (e.g. "condor")
        **params: Keyword parameters of the shape's formula

    Returns:
        A single price, or a BreakevenRange for two-sided shapes

    Raises:
        InvalidInputError: If the shape is unknown or parameters don't match it

    Example:
        >>> solve_breakeven("singleCall", underlying_price=500.0, premium=2.50)
        497.5
    """
    try:
        shape = StrategyShape(shape)
    except ValueError as e:
        raise InvalidInputError(f"Unknown strategy shape: {shape!r}") from e

    solver = _SOLVERS[shape]
    try:
        inspect.signature(solver).bind(**params)
    except TypeError as e:
        raise InvalidInputError(f"Invalid parameters for {shape.value}: {e}") from e

    return solver(**params)


def probability_of_profit(option_type: str, delta: float) -> float:
    """Delta used as a probability-OTM proxy, in percent.

    Puts: (1 - |delta|) * 100. Calls (probability of not being assigned):
    100 - delta * 100, with the call delta taken as quoted. This is a rough
    approximation, not a statistical probability.
    """
    if option_type == 'put':
        return (1 - abs(delta)) * 100
    return 100 - delta * 100


def breakevens_from_curve(curve: Sequence[PayoffPoint]) -> List[float]:
    """Zero crossings of a sampled payoff curve, linearly interpolated.

    A run of exact zeros is reported at its edges where P/L enters or leaves
    zero, so a flat zero segment yields at most two prices and a single zero
    sample yields one.

    Args:
        curve: PayoffPoints in ascending price order

    Returns:
        Ascending list of breakeven prices within the sampled range
    """
    crossings: List[float] = []
    last = len(curve) - 1

    for i, point in enumerate(curve):
        pl = point.profit_loss
        prev_pl = curve[i - 1].profit_loss if i > 0 else None

        if pl == 0:
            entering = prev_pl is not None and prev_pl != 0
            leaving = i < last and curve[i + 1].profit_loss != 0
            if entering or leaving:
                crossings.append(point.price)
            continue

        if prev_pl is not None and prev_pl != 0 and (prev_pl < 0) != (pl < 0):
            prev = curve[i - 1]
            fraction = prev_pl / (prev_pl - pl)
            crossings.append(prev.price + fraction * (point.price - prev.price))

    logger.debug("Found %d breakeven crossings over %d points", len(crossings), len(curve))
    return crossings
