"""Payoff curve data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PayoffPoint:
    """Profit/loss of a strategy at one settlement price.

    ``profit_part`` and ``loss_part`` split the value for two-colour area charts.
    """

    price: float
    profit_loss: float

    @property
    def profit_part(self) -> float:
        return max(0.0, self.profit_loss)

    @property
    def loss_part(self) -> float:
        return min(0.0, self.profit_loss)


@dataclass(frozen=True)
class RangeSpec:
    """Symmetric price sweep around the underlying.

    Attributes:
        pct: Half-width of the sweep as a fraction of the underlying (0.25 = ±25%)
        points: Number of samples, both ends included
    """

    pct: float
    points: int = 101

    def bounds(self, underlying_price: float) -> tuple[float, float]:
        half_width = underlying_price * self.pct
        return underlying_price - half_width, underlying_price + half_width
