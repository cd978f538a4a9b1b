"""
Trip Ledger - Group Expense Settlement Engine

Turns a trip's shared, unevenly-paid expenses into a per-member balance
sheet and a short list of payments that settle everyone up, and reconciles
actual plus planned spend against the trip's target budget.
"""

__version__ = "0.1.0"
__author__ = "Trip Ledger Team"
