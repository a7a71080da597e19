"""Configuration management for the insights engine.

This module centralizes every threshold and percentage table the engine
uses, together with environment variable overrides and JSON persistence
for custom tables.
"""

from __future__ import annotations

import json
import math
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import pandas as pd

# Environment overrides
TIMEZONE_ENV = "EXPENSE_INSIGHTS_TIMEZONE"
LOG_LEVEL = os.getenv("EXPENSE_INSIGHTS_LOG_LEVEL", "INFO").upper()
CONFIG_PATH: Optional[Path] = (
    Path(os.environ["EXPENSE_INSIGHTS_CONFIG"]).resolve()
    if os.getenv("EXPENSE_INSIGHTS_CONFIG")
    else None
)

# Share of the budget base assigned to each category (50/30/20 inspired).
DEFAULT_BUDGET_ALLOCATION: Dict[str, float] = {
    'Bills': 0.50,
    'Food': 0.15,
    'Transport': 0.15,
    'Shopping': 0.10,
    'Education': 0.05,
    'Travel': 0.03,
    'Other': 0.02,
}

# Monthly spend per category above this percent of income raises an alert.
DEFAULT_CATEGORY_LIMITS: Dict[str, float] = {
    'Food': 15.0,
    'Transport': 15.0,
    'Shopping': 10.0,
    'Bills': 50.0,
    'Education': 10.0,
    'Travel': 8.0,
    'Other': 5.0,
}

# (threshold, penalty) tiers, checked in order; first match wins.
DEFAULT_EXPENSE_RATIO_PENALTIES: Tuple[Tuple[float, int], ...] = ((90.0, 40), (70.0, 25), (50.0, 10))
DEFAULT_SAVINGS_RATE_PENALTIES: Tuple[Tuple[float, int], ...] = ((10.0, 20), (20.0, 10))


@dataclass(frozen=True)
class InsightsConfig:
    """Thresholds and tables shared by every insights component."""

    timezone: str = field(default_factory=lambda: os.getenv(TIMEZONE_ENV) or "UTC")
    extrapolation_days: int = 30

    # Patterns
    high_average_transaction: float = 50.0
    dominance_share: float = 60.0

    # Budget
    budget_allocation: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_BUDGET_ALLOCATION))

    # Forecast
    min_forecast_transactions: int = 3
    trend_window: int = 7
    trend_cap: float = 999.0
    high_confidence_transactions: int = 10

    # Alerts
    daily_spike_multiplier: float = 2.0
    category_spike_multiplier: float = 3.0
    overspending_ratio: float = 100.0
    high_spending_ratio: float = 80.0
    low_savings_rate: float = 10.0
    category_limits: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_CATEGORY_LIMITS))

    # Health
    expense_ratio_penalties: Tuple[Tuple[float, int], ...] = DEFAULT_EXPENSE_RATIO_PENALTIES
    savings_rate_penalties: Tuple[Tuple[float, int], ...] = DEFAULT_SAVINGS_RATE_PENALTIES
    warning_pattern_penalty: int = 10
    reduce_expenses_ratio: float = 80.0
    target_savings_rate: float = 20.0
    budget_planning_score: int = 70

    # Tips
    category_tip_count: int = 2

    def __post_init__(self) -> None:
        try:
            pd.Timestamp.now(tz=self.timezone)
        except (KeyError, ValueError, TypeError) as exc:
            raise ValueError(f"Unknown timezone '{self.timezone}'") from exc
        if any(pct < 0 for pct in self.budget_allocation.values()):
            raise ValueError("Budget allocation percentages must be non-negative")
        total = sum(self.budget_allocation.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Budget allocation must sum to 1.0, got {total:.4f}")
        if self.extrapolation_days <= 0:
            raise ValueError("extrapolation_days must be positive")
        if self.trend_window <= 0:
            raise ValueError("trend_window must be positive")
        # JSON round-trips tuples as lists
        object.__setattr__(
            self, 'expense_ratio_penalties', tuple(tuple(tier) for tier in self.expense_ratio_penalties)
        )
        object.__setattr__(
            self, 'savings_rate_penalties', tuple(tuple(tier) for tier in self.savings_rate_penalties)
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Path | str | None = None, **overrides: Any) -> InsightsConfig:
    """Build a config from defaults, an optional JSON file and keyword overrides.

    ``path`` falls back to ``EXPENSE_INSIGHTS_CONFIG``.  A set
    ``EXPENSE_INSIGHTS_TIMEZONE`` wins over the file but not over keywords.
    Unknown keys in either source raise ``ValueError`` so typos do not
    silently revert to defaults.
    """
    values: Dict[str, Any] = {}
    target = Path(path) if path is not None else CONFIG_PATH
    if target is not None:
        try:
            with target.open('r', encoding='utf-8') as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, OSError) as exc:
            raise ValueError(f"Could not read insights config '{target}': {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Insights config '{target}' must contain a JSON object")
        values.update(data)
    env_timezone = os.getenv(TIMEZONE_ENV)
    if env_timezone:
        values["timezone"] = env_timezone
    values.update(overrides)

    known = {f.name for f in fields(InsightsConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown insights config keys: {', '.join(unknown)}")
    return replace(InsightsConfig(), **values)


def save_config(config: InsightsConfig, path: Path | str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open('w', encoding='utf-8') as handle:
        json.dump(config.to_dict(), handle, indent=2, sort_keys=True)


def resolve_config(config: Optional[InsightsConfig]) -> InsightsConfig:
    # Fresh defaults per call so the mutable tables are never shared
    return config if config is not None else InsightsConfig()
