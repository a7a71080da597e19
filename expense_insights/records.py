"""Expense and income records plus the DataFrame preparation the engine uses.

Records mirror the JSON shape served by the CRUD API (``_id``,
``description``, ``amount``, ``category``, ``date``).  Validation happens
here, at the loading boundary; the analytics functions trust their input.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

EXPENSE_CATEGORIES = ('Food', 'Transport', 'Shopping', 'Bills', 'Education', 'Travel', 'Other')
INCOME_CATEGORIES = (
    'Freelance',
    'Part-time Job',
    'Investment',
    'Bonus',
    'Gift',
    'Rental',
    'Business',
    'Dividend',
    'Interest',
    'Side Hustle',
    'Commission',
    'Royalty',
    'Other',
)
RECURRING_FREQUENCIES = ('weekly', 'bi-weekly', 'monthly', 'quarterly', 'yearly')

FRAME_COLUMNS = ['id', 'description', 'amount', 'category', 'occurred_at']

_TRUE_LABELS = {'1', 'true', 'yes', 'y', 'on'}


def _clean(value: Any) -> Any:
    """Treat pandas missing markers (NaN/NaT/None) as absent."""
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _parse_amount(value: Any) -> float:
    value = _clean(value)
    if value is None:
        raise ValueError("Amount is required")
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Amount '{value}' is not numeric") from exc
    if amount <= 0:
        raise ValueError(f"Amount must be greater than 0, got {amount}")
    return amount


def _parse_timestamp(value: Any) -> datetime:
    value = _clean(value)
    if value is None:
        raise ValueError("Date is required")
    try:
        return pd.Timestamp(value).to_pydatetime()
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Date '{value}' could not be parsed") from exc


def _parse_category(value: Any, allowed: Sequence[str]) -> str:
    category = str(_clean(value) or '').strip()
    if category not in allowed:
        raise ValueError(f"Category must be one of: {', '.join(allowed)} (got '{category}')")
    return category


def _record_id(payload: Mapping[str, Any]) -> Optional[str]:
    raw = _clean(payload.get('_id', payload.get('id')))
    return None if raw is None else str(raw)


@dataclass(frozen=True)
class Expense:
    id: Optional[str]
    description: str
    amount: float
    category: str
    occurred_at: datetime

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> 'Expense':
        return cls(
            id=_record_id(payload),
            description=str(_clean(payload.get('description')) or ''),
            amount=_parse_amount(payload.get('amount')),
            category=_parse_category(payload.get('category'), EXPENSE_CATEGORIES),
            occurred_at=_parse_timestamp(payload.get('date', payload.get('occurred_at'))),
        )


@dataclass(frozen=True)
class Income:
    id: Optional[str]
    description: str
    amount: float
    category: str
    occurred_at: datetime
    is_recurring: bool = False
    recurring_frequency: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> 'Income':
        raw_recurring = _clean(payload.get('isRecurring', payload.get('is_recurring')))
        if isinstance(raw_recurring, str):
            is_recurring = raw_recurring.strip().lower() in _TRUE_LABELS
        else:
            is_recurring = bool(raw_recurring)

        frequency = _clean(payload.get('recurringFrequency', payload.get('recurring_frequency')))
        if frequency is not None:
            frequency = str(frequency).strip().lower()
            if frequency not in RECURRING_FREQUENCIES:
                raise ValueError(f"Recurring frequency must be one of: {', '.join(RECURRING_FREQUENCIES)}")
        if is_recurring and frequency is None:
            raise ValueError("Recurring incomes need a recurring frequency")

        return cls(
            id=_record_id(payload),
            description=str(_clean(payload.get('description')) or ''),
            amount=_parse_amount(payload.get('amount')),
            category=_parse_category(payload.get('category'), INCOME_CATEGORIES),
            occurred_at=_parse_timestamp(payload.get('date', payload.get('occurred_at'))),
            is_recurring=is_recurring,
            recurring_frequency=frequency,
        )


# ---------------------------------------------------------------------------
# DataFrame preparation
# ---------------------------------------------------------------------------


def localize_timestamp(value: datetime, timezone: str) -> pd.Timestamp:
    """Express ``value`` in ``timezone``; naive values are read as local to it."""
    stamp = pd.Timestamp(value)
    if stamp.tzinfo is None:
        return stamp.tz_localize(timezone, ambiguous=True, nonexistent='shift_forward')
    return stamp.tz_convert(timezone)


def expenses_frame(expenses: Iterable[Expense], timezone: str = 'UTC') -> pd.DataFrame:
    """Prepare expenses for analysis.

    Timestamps are converted to ``timezone`` (naive values are read as
    already being in it) and a ``day`` column holds the calendar-day key
    used for active-day and same-day comparisons.  Row order follows the
    input order.
    """
    rows = list(expenses)
    frame = pd.DataFrame(
        [
            {
                'id': expense.id,
                'description': expense.description,
                'amount': expense.amount,
                'category': expense.category,
            }
            for expense in rows
        ],
        columns=FRAME_COLUMNS[:-1],
    )
    frame['amount'] = pd.to_numeric(frame['amount'], errors='coerce').fillna(0.0).astype(float)
    frame['category'] = frame['category'].astype(object)
    frame['occurred_at'] = pd.DatetimeIndex(
        [localize_timestamp(expense.occurred_at, timezone) for expense in rows],
        tz=timezone,
    )
    frame['day'] = frame['occurred_at'].dt.date
    return frame


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------


def read_records(path: Path | str) -> pd.DataFrame:
    """Load a CSV export or a JSON array (CRUD API shape) into a DataFrame."""
    target = Path(path)
    ext = target.suffix.lower()
    if ext in {'.csv', ''}:
        return pd.read_csv(target, index_col=False)
    if ext == '.json':
        with target.open('r', encoding='utf-8') as handle:
            data = json.load(handle)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of records in '{target}'")
        return pd.DataFrame(data)
    raise ValueError(f"Unsupported file extension '{ext}'.")


def _frame_rows(df: pd.DataFrame) -> List[Dict[str, Any]]:
    if df is None or df.empty:
        return []
    return df.to_dict(orient='records')


def expenses_from_frame(df: pd.DataFrame) -> List[Expense]:
    return [Expense.from_dict(row) for row in _frame_rows(df)]


def incomes_from_frame(df: pd.DataFrame) -> List[Income]:
    return [Income.from_dict(row) for row in _frame_rows(df)]
