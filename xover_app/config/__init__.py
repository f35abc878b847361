"""
Indicator configuration module.

Default indicator periods, YAML-backed per-instrument overrides and
validation of the merged result.
"""
