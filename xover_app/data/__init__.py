"""
Market data models and payload parsing.

Candles handed to the engine and the crossover events produced for them by
the indicator service.
"""
