"""Ledger computation engine: balances, settlements and budget status"""

from .balances import BalanceCalculator, calculate_balances, calculate_fair_share
from .budget import BudgetReconciler, calculate_progress
from .settlement import SettlementPlanner, apply_settlements, greedy_settle

__all__ = [
    "BalanceCalculator",
    "BudgetReconciler",
    "SettlementPlanner",
    "calculate_balances",
    "calculate_fair_share",
    "calculate_progress",
    "apply_settlements",
    "greedy_settle",
]
