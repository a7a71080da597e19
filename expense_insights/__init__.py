"""Top‑level package for the expense insights engine.

The engine turns a user's expense and income history into derived
analytics.  The primary modules are:

* ``stats`` – summary statistics and monthly extrapolation
* ``patterns``, ``budget``, ``trend``, ``alerts``, ``health`` – the
  individual heuristics built on top of those statistics
* ``insights`` – ``generate_insights``, which runs everything at once
* ``assistant`` – keyword answers and quick tips built from insights

From the command line:

```bash
expense-insights expenses.json --monthly-income 2500
```
"""

from .alerts import Alert, generate_alerts
from .budget import BudgetRecommendation, BudgetSuggestion, allocate_budget
from .config import InsightsConfig, load_config, save_config
from .health import FinancialHealth, HealthRecommendation, score_financial_health
from .insights import Insights, generate_insights
from .patterns import Pattern, detect_patterns
from .records import EXPENSE_CATEGORIES, INCOME_CATEGORIES, Expense, Income
from .stats import Stats, aggregate_stats
from .tips import personalized_tips
from .trend import Prediction, forecast_trend

__all__ = [
    "Alert",
    "BudgetRecommendation",
    "BudgetSuggestion",
    "EXPENSE_CATEGORIES",
    "Expense",
    "FinancialHealth",
    "HealthRecommendation",
    "INCOME_CATEGORIES",
    "Income",
    "Insights",
    "InsightsConfig",
    "Pattern",
    "Prediction",
    "Stats",
    "aggregate_stats",
    "allocate_budget",
    "detect_patterns",
    "forecast_trend",
    "generate_alerts",
    "generate_insights",
    "load_config",
    "personalized_tips",
    "save_config",
    "score_financial_health",
]
