"""Budget Estimator"""

from storyscope.models import BudgetEstimate
from storyscope.models.logistics import BudgetItem, BudgetCategory
from .base import SceneGenerator

CONTINGENCY_RATE = 0.1

# Day rates per category; every line item is booked once
BUDGET_LINES = [
    ("Crew", [
        ("Director", 500),
        ("DP", 400),
        ("Camera Op", 300),
        ("Audio", 250),
        ("Gaffer", 300),
        ("PA", 150),
    ]),
    ("Equipment", [
        ("Camera package", 500),
        ("Lighting package", 300),
        ("Audio package", 200),
        ("Support equipment", 200),
    ]),
    ("Location & Logistics", [
        ("Location fees", 200),
        ("Permits", 150),
        ("Transportation", 200),
        ("Catering", 300),
    ]),
    ("Post-Production", [
        ("Data management", 100),
        ("Backup storage", 50),
    ]),
]


def budget_category(name: str, lines) -> BudgetCategory:
    items = [BudgetItem(name=item, quantity=1, rate=rate, total=rate) for item, rate in lines]
    return BudgetCategory(category=name, items=items, subtotal=sum(item.total for item in items))


class BudgetEstimator(SceneGenerator):
    """Fixed day-rate estimate: category subtotals plus a 10% contingency"""

    def __init__(self, *args, **kwargs):
        super().__init__("budget", *args, **kwargs)

    def generate(self, description: str) -> BudgetEstimate:
        breakdown = [budget_category(name, lines) for name, lines in BUDGET_LINES]
        subtotal = sum(category.subtotal for category in breakdown)
        contingency = subtotal * CONTINGENCY_RATE

        return BudgetEstimate(
            total=subtotal + contingency,
            breakdown=breakdown,
            contingency=contingency,
            currency="USD",
        )
