"""Heuristic spending-pattern triggers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

from .config import InsightsConfig, resolve_config
from .stats import Stats


@dataclass(frozen=True)
class Pattern:
    type: str
    severity: str
    message: str
    suggestion: str


def detect_patterns(stats: Stats, config: Optional[InsightsConfig] = None) -> List[Pattern]:
    config = resolve_config(config)
    patterns: List[Pattern] = []

    if stats.avg_per_transaction > config.high_average_transaction:
        patterns.append(Pattern(
            type='high_spending',
            severity='warning',
            message='Your average transaction is quite high',
            suggestion='Consider setting spending limits for non-essential categories',
        ))

    if stats.total > 0:
        for category, amount in stats.category_totals.items():
            share = amount / stats.total * 100
            if share > config.dominance_share:
                patterns.append(Pattern(
                    type='category_dominance',
                    severity='info',
                    message=f"{category} dominates your spending ({share:.1f}%)",
                    suggestion='Try to diversify your spending or review if this is sustainable',
                ))
                break

    logger.debug("Detected patterns: {}", [pattern.type for pattern in patterns])
    return patterns
