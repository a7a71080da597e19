"""Severity-tagged alerts for same-day spikes and income-relative overspending.

Same-day checks compare today's spending (the calendar day of ``now`` in
the configured timezone) with the user's averages.  Income checks compare
extrapolated monthly spending with the income basis and are skipped when
no income is known.  Alerts are independent; none suppresses another.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Sequence

import pandas as pd
from loguru import logger

from .config import InsightsConfig, resolve_config
from .records import Expense, expenses_frame, localize_timestamp
from .stats import Stats


@dataclass(frozen=True)
class Alert:
    type: str
    severity: str
    title: str
    message: str
    action: str


def local_today(timezone: str, now: Optional[datetime] = None) -> date:
    """Calendar date of ``now`` (default: the current instant) in ``timezone``."""
    if now is None:
        return pd.Timestamp.now(tz=timezone).date()
    return localize_timestamp(now, timezone).date()


def daily_alerts(
    frame: pd.DataFrame,
    stats: Stats,
    config: Optional[InsightsConfig] = None,
    now: Optional[datetime] = None,
) -> List[Alert]:
    config = resolve_config(config)
    alerts: List[Alert] = []
    if frame.empty:
        return alerts

    today = local_today(config.timezone, now)
    todays = frame[frame['day'] == today]
    today_total = float(todays['amount'].sum())

    if today_total > stats.avg_per_transaction * config.daily_spike_multiplier:
        alerts.append(Alert(
            type='high_daily_spending',
            severity='warning',
            title='High Spending Alert',
            message=f"You've spent ${today_total:,.2f} today, which is above your average",
            action='Consider reviewing your purchases for the rest of the day',
        ))

    today_by_category = todays.groupby('category')['amount'].sum()
    for category, category_total in stats.category_totals.items():
        daily_average = category_total / stats.active_days
        spent_today = float(today_by_category.get(category, 0.0))
        if spent_today > daily_average * config.category_spike_multiplier:
            alerts.append(Alert(
                type='unusual_category_spending',
                severity='info',
                title=f"{category} Spending Notice",
                message=f"Higher than usual {category.lower()} spending today",
                action=f"Review your {category.lower()} expenses",
            ))

    return alerts


def income_alerts(stats: Stats, config: Optional[InsightsConfig] = None) -> List[Alert]:
    config = resolve_config(config)
    alerts: List[Alert] = []
    if not stats.has_income:
        return alerts

    if stats.expense_ratio > config.overspending_ratio:
        alerts.append(Alert(
            type='overspending',
            severity='critical',
            title='Critical: Overspending Alert',
            message=f"You're spending {stats.expense_ratio:.1f}% of your income this month!",
            action='Immediately review and cut expenses to avoid debt',
        ))
    elif stats.expense_ratio > config.high_spending_ratio:
        alerts.append(Alert(
            type='high_spending',
            severity='warning',
            title='High Spending Alert',
            message=f"You're spending {stats.expense_ratio:.1f}% of your income",
            action='Consider reducing non-essential expenses',
        ))

    if stats.savings_rate < config.low_savings_rate:
        alerts.append(Alert(
            type='low_savings',
            severity='warning',
            title='Low Savings Alert',
            message=f"Your savings rate is only {stats.savings_rate:.1f}%",
            action='Try to save at least 20% of your income',
        ))

    for category, category_total in stats.category_totals.items():
        limit = config.category_limits.get(category)
        if not limit:
            continue
        category_monthly = category_total * (config.extrapolation_days / stats.active_days)
        category_ratio = category_monthly / stats.total_income * 100
        if category_ratio > limit:
            alerts.append(Alert(
                type='category_overspending',
                severity='info',
                title=f"{category} Budget Alert",
                message=f"{category} spending is {category_ratio:.1f}% of income (recommended: {limit:g}%)",
                action=f"Reduce {category.lower()} expenses or adjust budget",
            ))

    return alerts


def alerts_from_frame(
    frame: pd.DataFrame,
    stats: Stats,
    config: Optional[InsightsConfig] = None,
    now: Optional[datetime] = None,
) -> List[Alert]:
    alerts = daily_alerts(frame, stats, config, now) + income_alerts(stats, config)
    if alerts:
        logger.debug("Raised alerts: {}", [alert.type for alert in alerts])
    return alerts


def generate_alerts(
    expenses: Sequence[Expense],
    stats: Stats,
    config: Optional[InsightsConfig] = None,
    now: Optional[datetime] = None,
) -> List[Alert]:
    config = resolve_config(config)
    return alerts_from_frame(expenses_frame(expenses, config.timezone), stats, config, now)
