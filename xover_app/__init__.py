"""
Xover App - Crossover Entry Point Decision Engine

Decides whether the latest indicator crossover on a candle window is a valid
entry point for opening a long position, and replays the same decision over
history to enumerate past entry points.
"""

__version__ = "0.1.0"
__author__ = "Xover Team"
