"""Warehouse slot allocation engine.

Assigns pending consignment items to storage slots across the rooms of a
godown, with directional fill strategies, cross-room capacity advice and
snapshot-based undo.
"""

__version__ = "1.0.0"
