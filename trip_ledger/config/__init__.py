"""
Configuration module.

Frozen default parameters, YAML-backed per-trip overrides and
validation of override values.
"""
