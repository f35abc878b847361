"""
Utility functions module.

Time Semantics:
- Candle and crossover timestamps are epoch milliseconds or aware datetimes
- Timestamps are compared as given; conversion only happens for display
"""
