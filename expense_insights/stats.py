"""Summary statistics over a user's expense history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence

import pandas as pd
from loguru import logger

from .config import InsightsConfig, resolve_config
from .records import Expense, Income, expenses_frame


@dataclass
class Stats:
    total: float = 0.0
    avg_per_transaction: float = 0.0
    category_totals: Dict[str, float] = field(default_factory=dict)
    highest_category: Optional[str] = None
    transaction_count: int = 0
    active_days: int = 1
    monthly_expenses: float = 0.0
    expense_ratio: float = 0.0
    savings_rate: float = 0.0
    monthly_income: float = 0.0
    additional_income: float = 0.0
    total_income: float = 0.0

    def category_total(self, category: str) -> float:
        return self.category_totals.get(category, 0.0)

    @property
    def has_income(self) -> bool:
        return self.total_income > 0


def count_active_days(frame: pd.DataFrame) -> int:
    """Distinct calendar days with at least one expense, never below 1."""
    if frame.empty:
        return 1
    return max(int(frame['day'].nunique()), 1)


def income_basis(monthly_income: float = 0.0, incomes: Iterable[Income] = ()) -> float:
    """Declared salary plus any income records supplied alongside it."""
    return max(float(monthly_income or 0.0), 0.0) + float(sum(income.amount for income in incomes))


def stats_from_frame(
    frame: pd.DataFrame,
    monthly_income: float = 0.0,
    incomes: Iterable[Income] = (),
    config: Optional[InsightsConfig] = None,
) -> Stats:
    config = resolve_config(config)
    incomes = list(incomes)
    salary = max(float(monthly_income or 0.0), 0.0)
    total_income = income_basis(salary, incomes)

    count = len(frame)
    total = float(frame['amount'].sum()) if count else 0.0
    avg_per_transaction = total / max(count, 1)

    # sort=False keeps categories in order of first appearance
    grouped = frame.groupby('category', sort=False)['amount'].sum() if count else pd.Series(dtype=float)
    category_totals = {str(category): float(amount) for category, amount in grouped.items()}
    highest_category = max(category_totals, key=category_totals.get) if category_totals else None

    active_days = count_active_days(frame)
    monthly_expenses = total * (config.extrapolation_days / active_days)

    expense_ratio = 0.0
    savings_rate = 0.0
    if total_income > 0:
        expense_ratio = monthly_expenses / total_income * 100
        savings_rate = (total_income - monthly_expenses) / total_income * 100

    stats = Stats(
        total=total,
        avg_per_transaction=avg_per_transaction,
        category_totals=category_totals,
        highest_category=highest_category,
        transaction_count=count,
        active_days=active_days,
        monthly_expenses=monthly_expenses,
        expense_ratio=expense_ratio,
        savings_rate=savings_rate,
        monthly_income=salary,
        additional_income=total_income - salary,
        total_income=total_income,
    )
    logger.debug(
        "Aggregated {} expenses over {} active days (total={:.2f}, monthly={:.2f})",
        count,
        active_days,
        total,
        monthly_expenses,
    )
    return stats


def aggregate_stats(
    expenses: Sequence[Expense],
    monthly_income: float = 0.0,
    incomes: Iterable[Income] = (),
    config: Optional[InsightsConfig] = None,
) -> Stats:
    """Reduce expenses (and the income basis) to summary statistics."""
    config = resolve_config(config)
    frame = expenses_frame(expenses, config.timezone)
    return stats_from_frame(frame, monthly_income, incomes, config)
