"""Composite insights for a user's expense and income history.

``generate_insights`` is the single entry point callers use: it prepares the
expense frame once and runs stats, patterns, budget, forecast, alerts and
health scoring over it.  Nothing is cached between calls; the only inputs
besides the arguments are the clock (``now``) and the random source used for
the general tip (``rng``/``seed``), both injectable for reproducible output.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np
from loguru import logger

from .alerts import Alert, alerts_from_frame
from .budget import BudgetRecommendation, allocate_budget
from .config import InsightsConfig, resolve_config
from .health import FinancialHealth, score_financial_health
from .patterns import Pattern, detect_patterns
from .records import Expense, Income, expenses_frame
from .stats import Stats, stats_from_frame
from .tips import personalized_tips
from .trend import Prediction, trend_from_frame


@dataclass
class Insights:
    patterns: List[Pattern]
    budget_recommendations: List[BudgetRecommendation]
    personalized_tips: List[str]
    predictions: Optional[Prediction]
    alerts: List[Alert]
    stats: Stats
    financial_health: FinancialHealth
    generated_at: Optional[datetime] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload['generated_at'] = self.generated_at.isoformat() if self.generated_at else None
        return payload


def generate_insights(
    expenses: Sequence[Expense],
    incomes: Iterable[Income] = (),
    monthly_income: float = 0.0,
    *,
    config: Optional[InsightsConfig] = None,
    now: Optional[datetime] = None,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> Insights:
    config = resolve_config(config)
    if rng is None:
        rng = np.random.default_rng(seed)
    incomes = list(incomes)

    frame = expenses_frame(expenses, config.timezone)
    stats = stats_from_frame(frame, monthly_income, incomes, config)
    patterns = detect_patterns(stats, config)

    insights = Insights(
        patterns=patterns,
        budget_recommendations=allocate_budget(stats, config),
        personalized_tips=personalized_tips(stats, rng, config),
        predictions=trend_from_frame(frame, stats, config),
        alerts=alerts_from_frame(frame, stats, config, now),
        stats=stats,
        financial_health=score_financial_health(stats, patterns, config),
        generated_at=now,
    )
    logger.debug(
        "Generated insights: {} patterns, {} alerts, health={} ({})",
        len(insights.patterns),
        len(insights.alerts),
        insights.financial_health.score,
        insights.financial_health.grade,
    )
    return insights
