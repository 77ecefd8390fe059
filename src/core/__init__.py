"""
Core arithmetic primitives, state models, and contracts.

Rounding integer division, the error-carrying cumulative divider,
and the persisted divider state with its JSON Schema contract.
"""
