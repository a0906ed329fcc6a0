"""Scoring thresholds - every tunable constant of the engine in one table"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ScoringThresholds:
    """
    Constants shared by the scoring components.

    Percent values are on a 0-100 scale. The balance estimate factor stands in
    for last month's balance until a real balance history source exists.
    """

    # Period filter
    rolling_window_days: int = 30

    # Category aggregator
    default_top_n: int = 5

    # Cash control
    balance_estimate_factor: float = 0.92
    expense_rise_pct: float = 10.0
    combined_score_baseline: float = 50.0
    combined_score_weight: float = 0.8
    segment_upper_bounds: Tuple[int, ...] = (20, 40, 60, 80)

    # Clarity score
    gate_points: int = 20
    min_institutions_for_visibility: int = 2
    clarity_savings_rate_pct: float = 10.0
    fee_ratio_pct: float = 2.0
    strong_label_min: int = 80
    moderate_label_min: int = 50
    max_visibility: int = 40
    max_behavior: int = 20
    max_stability: int = 40

    # Insights
    subscription_load_pct: float = 10.0
    dining_ratio_pct: float = 25.0
    utilities_rise_factor: float = 1.1
    strong_savings_rate_pct: float = 20.0
    max_insights: int = 3

    # Budget (50/30/20)
    needs_share: float = 0.5
    wants_share: float = 0.3
    savings_share: float = 0.2


THRESHOLDS = ScoringThresholds()
