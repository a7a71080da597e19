"""Keyword-driven financial coach answering questions from computed insights."""

from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from .insights import Insights

HELP_TEXT = (
    "I can help you with:\n"
    "• Budget analysis and recommendations\n"
    "• Spending pattern insights\n"
    "• Savings goals and strategies\n"
    "• Financial health assessment\n"
    "• Category-wise expense breakdown\n"
    "• Personalized money-saving tips\n\n"
    "Just ask me anything about your finances!"
)

GOALS_TEXT = (
    "Setting financial goals is great! I recommend:\n"
    "• Emergency fund: 3-6 months of expenses\n"
    "• Savings rate: At least 20% of income\n"
    "• Housing costs: Under 30% of income\n"
    "• Debt payments: Under 36% of income\n\n"
    "What specific goal would you like to work towards?"
)

DEFAULT_RESPONSES = [
    "That's an interesting question! Could you be more specific about your financial situation?",
    "I'd be happy to help! Try asking about your budget, savings, spending categories, or financial goals.",
    "Based on your expense data, I can provide personalized advice. What aspect of your finances would you like to explore?",
    "Feel free to ask me about budgeting tips, expense analysis, or saving strategies!",
]


def _budget_reply(insights: Insights) -> str:
    stats = insights.stats
    if not stats.has_income:
        return "I'd love to help with budgeting! Please add your monthly salary first so I can give you personalized advice."
    if stats.expense_ratio > 80:
        verdict = 'You might want to review your spending habits!'
    elif stats.expense_ratio > 50:
        verdict = "You're on track, but keep monitoring your expenses."
    else:
        verdict = 'Great job managing your budget!'
    return (
        f"Based on your data, you're on pace to spend ${stats.monthly_expenses:,.2f} of your "
        f"${stats.total_income:,.2f} monthly income ({stats.expense_ratio:.1f}%). {verdict}"
    )


def _savings_reply(insights: Insights) -> str:
    stats = insights.stats
    if not stats.has_income:
        return "To calculate your savings potential, please add your monthly salary in the settings."
    savings = stats.total_income - stats.monthly_expenses
    if stats.savings_rate >= 20:
        verdict = "Excellent! You're exceeding the recommended 20% savings rate."
    elif stats.savings_rate >= 10:
        verdict = 'Good progress! Try to increase to 20% if possible.'
    else:
        verdict = 'Consider reducing expenses to boost your savings rate to at least 10-20%.'
    return f"You're currently saving ${savings:,.2f} per month ({stats.savings_rate:.1f}% savings rate). {verdict}"


def _category_reply(insights: Insights) -> str:
    stats = insights.stats
    if not stats.highest_category:
        return "Add some expenses first, and I'll analyze your spending patterns for you!"
    top = stats.highest_category
    return (
        f'Your highest spending category is "{top}" with ${stats.category_total(top):,.2f}. '
        'Consider if this aligns with your priorities and budget goals.'
    )


def respond(message: str, insights: Insights, rng: Optional[np.random.Generator] = None) -> str:
    """Answer a free-text question using the first matching intent."""
    text = (message or '').lower()

    if 'budget' in text or 'spend' in text:
        return _budget_reply(insights)
    if 'save' in text or 'saving' in text:
        return _savings_reply(insights)
    if 'category' in text or 'spending' in text:
        return _category_reply(insights)
    if 'help' in text or 'what can you do' in text:
        return HELP_TEXT
    if 'goal' in text or 'target' in text:
        return GOALS_TEXT

    rng = rng if rng is not None else np.random.default_rng()
    return DEFAULT_RESPONSES[int(rng.integers(len(DEFAULT_RESPONSES)))]


def quick_tips(insights: Optional[Insights]) -> List[Dict[str, str]]:
    """Short dashboard tips; onboarding hints until the first expense exists."""
    if insights is None or insights.stats.transaction_count == 0:
        return [
            {'icon': 'hello', 'text': 'Welcome! Start by adding your first expense to get personalized insights.', 'type': 'welcome'},
            {'icon': 'budget', 'text': 'Add your monthly salary to unlock advanced financial health analysis.', 'type': 'income'},
            {'icon': 'analytics', 'text': 'The more data you add, the smarter my recommendations become!', 'type': 'data'},
        ]

    tips: List[Dict[str, str]] = []
    stats = insights.stats
    health = insights.financial_health

    if stats.has_income:
        if health.score >= 80:
            icon = 'checkmark'
        elif health.score >= 60:
            icon = 'analytics'
        else:
            icon = 'warning'
        tips.append({
            'icon': icon,
            'text': f"Financial Health: {health.grade} ({health.score}/100)",
            'type': 'health',
            'color': health.color,
        })

    for tip in insights.personalized_tips[:2]:
        tips.append({'icon': 'alert', 'text': tip, 'type': 'tip'})

    if stats.has_income:
        high = stats.expense_ratio > 80
        tips.append({
            'icon': 'warning' if high else 'analytics',
            'text': f"You're spending {stats.expense_ratio:.1f}% of your income this month",
            'type': 'warning' if high else 'info',
        })

    return tips
