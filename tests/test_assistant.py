from datetime import datetime, timezone

import numpy as np

from expense_insights.assistant import DEFAULT_RESPONSES, GOALS_TEXT, HELP_TEXT, quick_tips, respond
from expense_insights.insights import generate_insights
from expense_insights.records import Expense

NOW = datetime(2024, 9, 30, tzinfo=timezone.utc)


def _insights(monthly_income=0.0):
    expenses = [
        Expense(id=None, description='', amount=10.0, category='Food', occurred_at=datetime(2024, 9, 1)),
        Expense(id=None, description='', amount=25.0, category='Shopping', occurred_at=datetime(2024, 9, 2)),
        Expense(id=None, description='', amount=5.0, category='Food', occurred_at=datetime(2024, 9, 3)),
    ]
    return generate_insights(expenses, monthly_income=monthly_income, now=NOW, seed=11)


def test_budget_question_needs_income():
    assert 'add your monthly salary' in respond('How is my budget?', _insights())
    reply = respond('How is my budget?', _insights(monthly_income=4000))
    assert '$400.00' in reply
    assert '(10.0%)' in reply
    assert 'Great job' in reply


def test_savings_question():
    reply = respond('Can I save more?', _insights(monthly_income=4000))
    assert '90.0% savings rate' in reply
    assert 'Excellent' in reply


def test_category_question():
    reply = respond('Which category is biggest?', _insights())
    assert '"Shopping"' in reply


def test_help_and_goals():
    assert respond('help', _insights()) == HELP_TEXT
    assert respond('I have a target', _insights()) == GOALS_TEXT


def test_default_reply_is_seedable():
    first = respond('hello there', _insights(), np.random.default_rng(3))
    second = respond('hello there', _insights(), np.random.default_rng(3))
    assert first == second
    assert first in DEFAULT_RESPONSES


def test_quick_tips():
    welcome = quick_tips(generate_insights([], now=NOW, seed=1))
    assert [tip['type'] for tip in welcome] == ['welcome', 'income', 'data']

    tips = quick_tips(_insights(monthly_income=4000))
    assert tips[0]['type'] == 'health'
    assert tips[0]['text'].startswith('Financial Health: ')
    assert [tip['type'] for tip in tips[1:]] == ['tip', 'tip', 'info']

    no_income = quick_tips(_insights())
    assert [tip['type'] for tip in no_income] == ['tip', 'tip']
