"""
Utility functions module.

Money helpers shared by the ledger components.

Money Semantics:
- Amounts travel as floats in currency units
- Settlement arithmetic runs on integer minor units (cents) so that
  rounded transfers still close the ledger exactly
- Balances are allocated to minor units by largest remainder, keeping
  the rounded ledger closed
"""
