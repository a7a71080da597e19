"""Unit tests for expense_insights.stats."""

from __future__ import annotations

from datetime import datetime, timezone

from expense_insights.config import InsightsConfig
from expense_insights.records import Expense, Income
from expense_insights.stats import aggregate_stats


def _expense(category, amount, when):
    return Expense(id=None, description=f'{category} purchase', amount=amount, category=category, occurred_at=when)


def scenario_one():
    return [
        _expense('Food', 20.0, datetime(2024, 1, 1, 9)),
        _expense('Food', 30.0, datetime(2024, 1, 1, 18)),
        _expense('Food', 50.0, datetime(2024, 1, 2, 12)),
    ]


def test_linear_monthly_extrapolation() -> None:
    stats = aggregate_stats(scenario_one(), monthly_income=1000)
    assert stats.total == 100
    assert stats.transaction_count == 3
    assert stats.active_days == 2
    assert abs(stats.monthly_expenses - 1500) < 1e-6
    assert abs(stats.expense_ratio - 150) < 1e-6
    assert abs(stats.savings_rate + 50) < 1e-6
    assert abs(stats.avg_per_transaction - 100 / 3) < 1e-6


def test_category_totals_sum_to_total() -> None:
    expenses = [
        _expense('Food', 12.35, datetime(2024, 2, 1)),
        _expense('Bills', 80.10, datetime(2024, 2, 2)),
        _expense('Transport', 7.77, datetime(2024, 2, 2)),
        _expense('Food', 3.33, datetime(2024, 2, 5)),
    ]
    stats = aggregate_stats(expenses)
    assert abs(sum(stats.category_totals.values()) - stats.total) < 1e-6
    assert list(stats.category_totals) == ['Food', 'Bills', 'Transport']
    assert stats.category_total('Travel') == 0.0


def test_ratio_and_savings_add_to_hundred() -> None:
    stats = aggregate_stats(scenario_one(), monthly_income=4321.5)
    assert abs(stats.expense_ratio + stats.savings_rate - 100) < 1e-6


def test_no_income_disables_ratios() -> None:
    stats = aggregate_stats(scenario_one(), monthly_income=0)
    assert stats.expense_ratio == 0
    assert stats.savings_rate == 0
    assert not stats.has_income


def test_empty_history() -> None:
    stats = aggregate_stats([])
    assert stats.total == 0
    assert stats.avg_per_transaction == 0
    assert stats.category_totals == {}
    assert stats.highest_category is None
    assert stats.active_days == 1
    assert stats.monthly_expenses == 0


def test_highest_category_ties_go_to_first_seen() -> None:
    expenses = [
        _expense('Transport', 10.0, datetime(2024, 1, 1)),
        _expense('Food', 10.0, datetime(2024, 1, 2)),
    ]
    assert aggregate_stats(expenses).highest_category == 'Transport'


def test_active_days_follow_configured_timezone() -> None:
    expenses = [
        _expense('Food', 5.0, datetime(2024, 1, 1, 23, 30, tzinfo=timezone.utc)),
        _expense('Food', 5.0, datetime(2024, 1, 2, 0, 30, tzinfo=timezone.utc)),
    ]
    assert aggregate_stats(expenses, config=InsightsConfig(timezone='UTC')).active_days == 2
    new_york = InsightsConfig(timezone='America/New_York')
    assert aggregate_stats(expenses, config=new_york).active_days == 1


def test_income_records_extend_the_income_basis() -> None:
    bonus = Income(id='i1', description='Bonus', amount=500.0, category='Bonus', occurred_at=datetime(2024, 1, 5))
    stats = aggregate_stats(scenario_one(), monthly_income=1000, incomes=[bonus])
    assert stats.monthly_income == 1000
    assert stats.additional_income == 500
    assert stats.total_income == 1500
    assert abs(stats.expense_ratio - 100) < 1e-6
