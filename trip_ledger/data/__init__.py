"""
Ledger input module.

Immutable snapshot models for members, expenses and planned costs, parsers
for raw data-API records, and filtering of unified expense rows.
"""
