"""Command line entry point: print insights for exported expense records."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

import numpy as np
import pandas as pd
from loguru import logger

from .assistant import respond
from .config import load_config
from .insights import generate_insights
from .logger import setup_logging
from .records import expenses_from_frame, incomes_from_frame, read_records


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Generate spending insights from expense records.')
    parser.add_argument('expenses', help='CSV or JSON file with expense records')
    parser.add_argument('--incomes', help='CSV or JSON file with income records')
    parser.add_argument('--monthly-income', type=float, default=0.0, help='Declared monthly salary')
    parser.add_argument('--config', help='JSON file with threshold overrides')
    parser.add_argument('--timezone', help='Timezone used for calendar-day grouping')
    parser.add_argument('--today', help='Evaluate same-day alerts as of this timestamp')
    parser.add_argument('--seed', type=int, help='Seed for the general tip selection')
    parser.add_argument('--question', help='Ask the assistant a question instead of printing insights')
    parser.add_argument('--log-level', default=None, help='Log level (default: EXPENSE_INSIGHTS_LOG_LEVEL or INFO)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        overrides = {'timezone': args.timezone} if args.timezone else {}
        config = load_config(args.config, **overrides)
        expenses = expenses_from_frame(read_records(args.expenses))
        incomes = incomes_from_frame(read_records(args.incomes)) if args.incomes else []
        now = pd.Timestamp(args.today).to_pydatetime() if args.today else None
    except (OSError, ValueError) as exc:
        logger.error("Could not load inputs: {}", exc)
        return 1

    rng = np.random.default_rng(args.seed)
    insights = generate_insights(
        expenses,
        incomes,
        args.monthly_income,
        config=config,
        now=now,
        rng=rng,
    )

    if args.question:
        print(respond(args.question, insights, rng))
    else:
        json.dump(insights.to_dict(), sys.stdout, indent=2, default=str)
        sys.stdout.write('\n')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
