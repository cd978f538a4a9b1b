"""
Derived result models module.

Balances, settlements and budget status computed fresh from a snapshot.
Never persisted; frozen dataclasses throughout.
"""
