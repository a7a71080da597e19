"""Fixed-percentage budget allocation compared against actual spending."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import InsightsConfig, resolve_config
from .stats import Stats

CATEGORY_DESCRIPTIONS: Dict[str, str] = {
    'Bills': 'Essential expenses',
    'Food': 'Food & dining',
    'Transport': 'Transportation',
    'Shopping': 'Discretionary spending',
    'Education': 'Education & learning',
    'Travel': 'Travel & vacation',
    'Other': 'Miscellaneous',
}

INCOME_GUIDELINE = 'Based on your actual monthly income using the 50/30/20 budgeting rule'
EXTRAPOLATED_GUIDELINE = 'Based on your current spending patterns (add salary for accurate allocation)'


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (``round`` would go to even)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class BudgetSuggestion:
    category: str
    recommended: int
    current: float
    description: str


@dataclass
class BudgetRecommendation:
    type: str
    title: str
    guidelines: str
    total_allocated: float
    suggestions: List[BudgetSuggestion] = field(default_factory=list)


def _describe(category: str, pct: float) -> str:
    label = CATEGORY_DESCRIPTIONS.get(category, category)
    if category == 'Bills':
        return f"{label} ({pct * 100:g}% rule)"
    return f"{label} ({pct * 100:g}% guideline)"


def allocate_budget(stats: Stats, config: Optional[InsightsConfig] = None) -> List[BudgetRecommendation]:
    """Spread the budget base over the category table.

    The base is the income basis when one is declared, otherwise the
    extrapolated monthly spend, so the table stays useful without a salary.
    """
    config = resolve_config(config)
    allocated = stats.total_income if stats.has_income else stats.monthly_expenses

    suggestions = [
        BudgetSuggestion(
            category=category,
            recommended=round_half_up(allocated * pct),
            current=stats.category_total(category),
            description=_describe(category, pct),
        )
        for category, pct in config.budget_allocation.items()
    ]

    return [BudgetRecommendation(
        type='budget_allocation',
        title='Smart Budget Allocation',
        guidelines=INCOME_GUIDELINE if stats.has_income else EXTRAPOLATED_GUIDELINE,
        total_allocated=allocated,
        suggestions=suggestions,
    )]
