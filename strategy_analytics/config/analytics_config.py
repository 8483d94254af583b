"""Named constants for the analytics core.

Every heuristic constant the estimators use lives here so tests and callers
can override it instead of patching literals.
"""

from typing import Any, Dict

from ..models.payoff import RangeSpec
from ..utils.error_handling import ConfigurationError


class AnalyticsConfig:
    """Configuration for Greeks estimation, leg economics and payoff sweeps."""

    def __init__(
        self,
        volatility: float = 0.25,
        contract_multiplier: int = 100,
        days_per_year: float = 365.0,
        greek_scale: float = 0.01,
        gamma_peak: float = 0.05,
        gamma_decay: float = 10.0,
        direction_threshold: float = 0.1,
        sweep_pct: float = 0.25,
        condor_sweep_pct: float = 0.15,
        pmcc_sweep_pct: float = 0.30,
        curve_points: int = 101,
    ):
        """Initialize analytics configuration.

        Args:
            volatility: Assumed implied volatility when the market snapshot has none
            contract_multiplier: Underlying units per contract
            days_per_year: Day count used to convert DTE to years
            greek_scale: Scale applied to the theta and vega heuristics
            gamma_peak: Gamma of an at-the-money single contract
            gamma_decay: How fast gamma falls off with squared moneyness
            direction_threshold: |net delta| above which a strategy is directional
            sweep_pct: Payoff sweep half-width for generic strategies (0.25 = ±25%)
            condor_sweep_pct: Payoff sweep half-width for iron condors
            pmcc_sweep_pct: Payoff sweep half-width for poor man's covered calls
            curve_points: Number of samples per payoff curve

        Raises:
            ConfigurationError: If a value is outside its usable range
        """
        if volatility <= 0:
            raise ConfigurationError(f"volatility must be positive, got {volatility}")
        if contract_multiplier <= 0:
            raise ConfigurationError(f"contract_multiplier must be positive, got {contract_multiplier}")
        if days_per_year <= 0:
            raise ConfigurationError(f"days_per_year must be positive, got {days_per_year}")
        if direction_threshold < 0:
            raise ConfigurationError(f"direction_threshold must be non-negative, got {direction_threshold}")
        for name, pct in (("sweep_pct", sweep_pct),
                          ("condor_sweep_pct", condor_sweep_pct),
                          ("pmcc_sweep_pct", pmcc_sweep_pct)):
            if not 0 < pct < 1:
                raise ConfigurationError(f"{name} must be between 0 and 1, got {pct}")
        if curve_points < 2:
            raise ConfigurationError(f"curve_points must be at least 2, got {curve_points}")

        self.volatility = volatility
        self.contract_multiplier = contract_multiplier
        self.days_per_year = days_per_year
        self.greek_scale = greek_scale
        self.gamma_peak = gamma_peak
        self.gamma_decay = gamma_decay
        self.direction_threshold = direction_threshold
        self.sweep_pct = sweep_pct
        self.condor_sweep_pct = condor_sweep_pct
        self.pmcc_sweep_pct = pmcc_sweep_pct
        self.curve_points = curve_points

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "AnalyticsConfig":
        """Create AnalyticsConfig from dictionary (e.g., from YAML).

        Args:
            config: Dictionary with ``greeks``, ``contracts`` and ``payoff`` sections

        Returns:
            AnalyticsConfig instance
        """
        greeks = config.get('greeks', {})
        contracts = config.get('contracts', {})
        payoff = config.get('payoff', {})

        return cls(
            volatility=greeks.get('volatility', 0.25),
            greek_scale=greeks.get('scale', 0.01),
            gamma_peak=greeks.get('gamma_peak', 0.05),
            gamma_decay=greeks.get('gamma_decay', 10.0),
            direction_threshold=greeks.get('direction_threshold', 0.1),
            contract_multiplier=contracts.get('multiplier', 100),
            days_per_year=contracts.get('days_per_year', 365.0),
            sweep_pct=payoff.get('sweep_pct', 0.25),
            condor_sweep_pct=payoff.get('condor_sweep_pct', 0.15),
            pmcc_sweep_pct=payoff.get('pmcc_sweep_pct', 0.30),
            curve_points=payoff.get('points', 101),
        )

    @property
    def default_range(self) -> RangeSpec:
        return RangeSpec(pct=self.sweep_pct, points=self.curve_points)

    @property
    def condor_range(self) -> RangeSpec:
        return RangeSpec(pct=self.condor_sweep_pct, points=self.curve_points)

    @property
    def pmcc_range(self) -> RangeSpec:
        return RangeSpec(pct=self.pmcc_sweep_pct, points=self.curve_points)


DEFAULT_CONFIG = AnalyticsConfig()
