"""Composite 0-100 financial health score with grade and recommendations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from .config import InsightsConfig, resolve_config
from .patterns import Pattern
from .stats import Stats

# (minimum score, grade, color, status), highest first
GRADE_TABLE: Tuple[Tuple[int, str, str, str], ...] = (
    (90, 'A+', 'green', 'Excellent financial health!'),
    (80, 'A', 'green', 'Great financial management'),
    (70, 'B', 'blue', 'Good financial habits'),
    (60, 'C', 'yellow', 'Room for improvement'),
    (50, 'D', 'orange', 'Need to work on finances'),
)
FAILING_GRADE = ('F', 'red', 'Critical financial situation')
UNKNOWN_STATUS = 'Add your monthly salary to get your financial health score'

EXPENSE_RATIO_FACTORS = ('Very high expense ratio', 'High expense ratio', 'Moderate expense ratio')
SAVINGS_RATE_FACTORS = ('Low savings rate', 'Moderate savings rate')


@dataclass(frozen=True)
class HealthRecommendation:
    priority: str
    title: str
    message: str
    action: str


@dataclass
class FinancialHealth:
    score: int
    grade: str
    status: str
    color: str
    factors: List[str] = field(default_factory=list)
    recommendations: List[HealthRecommendation] = field(default_factory=list)


ADD_INCOME_RECOMMENDATION = HealthRecommendation(
    priority='high',
    title='Add Your Monthly Income',
    message='Set your monthly salary to get accurate budget allocation and financial health analysis.',
    action='Add your income in settings to unlock personalized recommendations',
)


def grade_for(score: float) -> Tuple[str, str, str]:
    """Return ``(grade, color, status)`` for a clamped score."""
    for minimum, grade, color, status in GRADE_TABLE:
        if score >= minimum:
            return grade, color, status
    return FAILING_GRADE


def _tier_penalty(value: float, tiers, labels, above: bool) -> Tuple[int, Optional[str]]:
    for index, (threshold, penalty) in enumerate(tiers):
        if (value > threshold) if above else (value < threshold):
            label = labels[index] if index < len(labels) else labels[-1]
            return int(penalty), label
    return 0, None


def health_recommendations(
    score: float,
    stats: Stats,
    config: Optional[InsightsConfig] = None,
) -> List[HealthRecommendation]:
    config = resolve_config(config)
    if not stats.has_income:
        return [ADD_INCOME_RECOMMENDATION]

    recommendations: List[HealthRecommendation] = []
    if stats.expense_ratio > config.reduce_expenses_ratio:
        recommendations.append(HealthRecommendation(
            priority='high',
            title='Reduce Monthly Expenses',
            message=f"You're spending {stats.expense_ratio:.1f}% of your income. Aim for 70% or less.",
            action='Review and cut non-essential expenses',
        ))
    if stats.savings_rate < config.target_savings_rate:
        recommendations.append(HealthRecommendation(
            priority='medium',
            title='Increase Savings Rate',
            message=f"Current savings rate: {stats.savings_rate:.1f}%. Aim for {config.target_savings_rate:g}% or higher.",
            action='Automate savings and reduce discretionary spending',
        ))
    if score < config.budget_planning_score:
        recommendations.append(HealthRecommendation(
            priority='high',
            title='Budget Planning Needed',
            message='Your financial health score indicates need for better budgeting',
            action='Create a detailed monthly budget and stick to it',
        ))
    return recommendations


def score_financial_health(
    stats: Stats,
    patterns: Sequence[Pattern],
    config: Optional[InsightsConfig] = None,
) -> FinancialHealth:
    config = resolve_config(config)
    if not stats.has_income:
        return FinancialHealth(
            score=0,
            grade='Unknown',
            status=UNKNOWN_STATUS,
            color='gray',
            recommendations=health_recommendations(0, stats, config),
        )

    score = 100
    factors: List[str] = []

    penalty, factor = _tier_penalty(
        stats.expense_ratio, config.expense_ratio_penalties, EXPENSE_RATIO_FACTORS, above=True
    )
    score -= penalty
    if factor:
        factors.append(factor)

    penalty, factor = _tier_penalty(
        stats.savings_rate, config.savings_rate_penalties, SAVINGS_RATE_FACTORS, above=False
    )
    score -= penalty
    if factor:
        factors.append(factor)

    warnings = [pattern for pattern in patterns if pattern.severity == 'warning']
    if warnings:
        score -= len(warnings) * config.warning_pattern_penalty
        factors.append(f"{len(warnings)} spending pattern warning(s)")

    score = max(0, min(100, score))
    grade, color, status = grade_for(score)
    logger.debug("Financial health score {} ({})", score, grade)

    return FinancialHealth(
        score=score,
        grade=grade,
        status=status,
        color=color,
        factors=factors,
        recommendations=health_recommendations(score, stats, config),
    )
