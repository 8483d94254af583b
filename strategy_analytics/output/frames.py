"""pandas DataFrame views of analytics results, for charting and tables."""

from typing import List, Sequence

import pandas as pd

from ..models.payoff import PayoffPoint
from ..models.wheel import WheelCandidate


def payoff_curve_to_frame(curve: Sequence[PayoffPoint]) -> pd.DataFrame:
    """Payoff curve as columns price, profit_loss, profit, loss."""
    return pd.DataFrame(
        {
            'price': [p.price for p in curve],
            'profit_loss': [p.profit_loss for p in curve],
            'profit': [p.profit_part for p in curve],
            'loss': [p.loss_part for p in curve],
        },
        columns=['price', 'profit_loss', 'profit', 'loss'],
    )


def candidates_to_frame(candidates: List[WheelCandidate]) -> pd.DataFrame:
    """One row per wheel candidate with its economics and score."""
    rows = [
        {
            'Type': c.kind.upper(),
            'Strike': c.strike,
            'Premium': c.premium,
            'Delta': abs(c.delta),
            'DTE': c.days_to_expiry,
            'Capital': c.capital_required,
            'Max Profit': c.max_profit,
            'Annualized %': round(c.annualized_return, 1),
            'PoP %': round(c.prob_profit, 1),
            'Breakeven': c.breakeven,
            'Protection %': round(c.downside_protection, 2),
            'Score': c.score,
            'Rating': c.recommendation,
        }
        for c in candidates
    ]
    return pd.DataFrame(rows)
