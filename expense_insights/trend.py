"""Near-term spend forecast and recent-vs-prior trend comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd
from loguru import logger

from .budget import round_half_up
from .config import InsightsConfig, resolve_config
from .records import Expense, expenses_frame
from .stats import Stats


@dataclass(frozen=True)
class Prediction:
    predicted: int
    trend: str
    trend_percentage: int
    confidence: str
    monthly_income: float
    predicted_ratio: float


def _window_mean(window: pd.Series) -> float:
    return float(window.sum()) / max(len(window), 1)


def trend_from_frame(frame: pd.DataFrame, stats: Stats, config: Optional[InsightsConfig] = None) -> Optional[Prediction]:
    config = resolve_config(config)
    if len(frame) < config.min_forecast_transactions:
        logger.debug("Skipping forecast: {} expenses is below the minimum", len(frame))
        return None

    predicted_monthly = stats.total / stats.active_days * config.extrapolation_days

    # Stable sort so same-instant records keep their input order
    amounts = frame.sort_values('occurred_at', kind='mergesort')['amount'].reset_index(drop=True)
    window = config.trend_window
    recent = amounts.iloc[-window:]
    older = amounts.iloc[-2 * window:-window]
    recent_avg = _window_mean(recent)
    older_avg = _window_mean(older)

    trend_pct = 0.0
    if older_avg > 0:
        trend_pct = abs((recent_avg - older_avg) / older_avg * 100)
    elif recent_avg > 0:
        # No prior baseline; report a flat first-signal increase
        trend_pct = 100.0
    trend_pct = min(trend_pct, config.trend_cap)

    return Prediction(
        predicted=round_half_up(predicted_monthly),
        trend='increasing' if recent_avg > older_avg else 'decreasing',
        trend_percentage=round_half_up(trend_pct),
        confidence='high' if len(frame) > config.high_confidence_transactions else 'medium',
        monthly_income=stats.total_income,
        predicted_ratio=predicted_monthly / stats.total_income * 100 if stats.has_income else 0.0,
    )


def forecast_trend(
    expenses: Sequence[Expense],
    stats: Stats,
    config: Optional[InsightsConfig] = None,
) -> Optional[Prediction]:
    """Forecast next month's spend, or ``None`` when history is too short."""
    config = resolve_config(config)
    return trend_from_frame(expenses_frame(expenses, config.timezone), stats, config)
