"""
Domain models and value objects.

Contains the persisted state model of the cumulative divider.
"""

from src.core.domain.divider_state import DividerState

__all__ = [
    "DividerState",
]
