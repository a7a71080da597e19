"""Money-saving tips keyed by the user's heaviest spending category."""

from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from .config import InsightsConfig, resolve_config
from .stats import Stats

CATEGORY_TIPS: Dict[str, List[str]] = {
    'Food': [
        'Try meal prepping to reduce food costs by up to 40%',
        'Pack lunch instead of buying - save $150+ monthly',
        'Shop with a grocery list to avoid impulse purchases',
        "Cook at home more often - it's healthier and cheaper",
    ],
    'Transport': [
        'Consider public transport or carpooling to save on fuel',
        'Use a bike for short distances - healthy and economical',
        'Track fuel prices and fill up at the cheapest stations',
        'Maintain your vehicle regularly to improve fuel efficiency',
    ],
    'Shopping': [
        'Wait 24 hours before making non-essential purchases',
        'Use cashback apps and compare prices online',
        'Shop during sales and use coupons when available',
        'Avoid impulse buying - stick to your shopping list',
    ],
    'Bills': [
        'Switch to energy-efficient appliances to lower utility bills',
        'Review subscriptions and cancel unused services',
        'Consider refinancing or negotiating better rates',
        'Set up automatic payments to avoid late fees',
    ],
    'Education': [
        'Look for free online courses and educational resources',
        'Apply for scholarships and educational grants',
        'Use library resources instead of buying books',
        'Consider community college for cost-effective education',
    ],
    'Travel': [
        'Book accommodations in advance for better rates',
        'Be flexible with travel dates for cheaper flights',
        'Travel during off-peak seasons to save money',
        'Consider road trips instead of flying for short distances',
    ],
    'Other': [
        'Track all expenses to identify spending patterns',
        'Set aside money for unexpected expenses',
        'Review and categorize expenses regularly',
        'Look for ways to reduce miscellaneous spending',
    ],
}

GENERAL_TIPS = [
    'Track your spending daily to stay aware of your habits',
    'Set specific savings goals to stay motivated',
    'Consider the 24-hour rule for purchases over $50',
    'Use apps to find deals and discounts before shopping',
]

FALLBACK_TIP_CATEGORY = 'Food'


def personalized_tips(
    stats: Stats,
    rng: Optional[np.random.Generator] = None,
    config: Optional[InsightsConfig] = None,
) -> List[str]:
    """Category tips for the top category plus one randomly drawn general tip.

    Pass a seeded ``rng`` to make the general tip reproducible.
    """
    config = resolve_config(config)
    rng = rng if rng is not None else np.random.default_rng()

    category_tips = CATEGORY_TIPS.get(stats.highest_category or '', CATEGORY_TIPS[FALLBACK_TIP_CATEGORY])
    tips = list(category_tips[:config.category_tip_count])
    tips.append(GENERAL_TIPS[int(rng.integers(len(GENERAL_TIPS)))])
    return tips
