"""Contracts module - protocols shared across layers.

By depending on protocols rather than concrete implementations, the
application layer can swap fill strategies or item sources without changes.

Example:
    ```python
    from storerooms.contracts import FillStrategy, PendingItemSource
    ```
"""

from .sources import PendingItemSource as PendingItemSource
from .strategies import FillStrategy as FillStrategy
