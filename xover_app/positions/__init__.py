"""
Open position tracking.
"""

from .store import OpenPosition, OpenPositionQuery, OpenPositionStore

__all__ = ["OpenPosition", "OpenPositionQuery", "OpenPositionStore"]
