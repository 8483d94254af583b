"""Option leg, Greeks and market snapshot data models."""

from dataclasses import dataclass
from typing import Any, Dict, Literal

from ..utils.error_handling import InvalidInputError

OptionType = Literal["call", "put"]
Side = Literal["long", "short"]

_SIDE_ALIASES = {
    "long": "long",
    "buy": "long",
    "short": "short",
    "sell": "short",
}


@dataclass(frozen=True)
class Greeks:
    """Signed risk sensitivities of a leg or a whole strategy.

    Values are already scaled by quantity and flipped for short positions,
    so strategy totals are plain elementwise sums.
    """

    delta: float
    gamma: float
    theta: float
    vega: float

    @classmethod
    def zero(cls) -> "Greeks":
        return cls(delta=0.0, gamma=0.0, theta=0.0, vega=0.0)

    def __add__(self, other: "Greeks") -> "Greeks":
        if not isinstance(other, Greeks):
            return NotImplemented
        return Greeks(
            delta=self.delta + other.delta,
            gamma=self.gamma + other.gamma,
            theta=self.theta + other.theta,
            vega=self.vega + other.vega,
        )

    def __repr__(self) -> str:
        return (f"Greeks(Δ={self.delta:.3f} Γ={self.gamma:.4f} "
                f"Θ={self.theta:.2f} V={self.vega:.2f})")


@dataclass(frozen=True)
class OptionLeg:
    """One option position within a strategy.

    Premium is quoted per share; quantity is in contracts. Immutable: a changed
    input means a new leg (``dataclasses.replace``) and a full re-evaluation.

    Preconditions (not checked): strike > 0, premium >= 0, quantity >= 1.
    """

    option_type: OptionType
    side: Side
    strike: float
    premium: float
    quantity: int = 1

    # Attached by analytics.greeks.with_greeks
    greeks: Greeks | None = None

    @property
    def is_long(self) -> bool:
        return self.side == "long"

    @property
    def is_short(self) -> bool:
        return self.side == "short"

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "OptionLeg":
        """Create an OptionLeg from a plain form/quote record.

        Accepts ``option_type`` or ``type`` for the contract type, and ``side``
        (long/short) or ``action`` (buy/sell) for the direction.

        Args:
            record: Mapping with leg fields

        Returns:
            OptionLeg instance

        Raises:
            InvalidInputError: If the type or side is not recognised
        """
        option_type = str(record.get("option_type", record.get("type", ""))).lower()
        if option_type not in ("call", "put"):
            raise InvalidInputError(f"Invalid option type: {option_type!r}")

        raw_side = str(record.get("side", record.get("action", ""))).lower()
        side = _SIDE_ALIASES.get(raw_side)
        if side is None:
            raise InvalidInputError(f"Invalid leg side: {raw_side!r}")

        return cls(
            option_type=option_type,
            side=side,
            strike=float(record.get("strike", 0.0)),
            premium=float(record.get("premium", 0.0)),
            quantity=int(record.get("quantity", 1)),
        )

    def __repr__(self) -> str:
        return (f"OptionLeg({self.side} {self.quantity}x {self.strike:g}"
                f"{self.option_type[0].upper()} @ {self.premium:.2f})")


@dataclass(frozen=True)
class MarketContext:
    """Read-only market snapshot shared by one evaluation pass.

    ``days_to_expiry`` is resolved by the caller; nothing here reads the clock.
    ``volatility`` of None means "use the configured default".
    """

    underlying_price: float
    days_to_expiry: int = 30
    volatility: float | None = None


@dataclass(frozen=True)
class StockPosition:
    """Shares held alongside option legs (the stock side of a covered call)."""

    shares: int
    cost_basis: float
