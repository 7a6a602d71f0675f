"""Service factory for dependency injection."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from storerooms.application.config import (
    WarehouseConfiguration,
    config_to_rooms,
    default_config,
)
from storerooms.domain.services import (
    AllocationEngine,
    CapacityAdvisor,
    FillStrategyFactory,
    HistoryManager,
    PendingQueue,
    RemovalService,
    RoomRegistry,
    SearchIndex,
    SlotStore,
)
from storerooms.domain.services.history import utc_now

if TYPE_CHECKING:
    from storerooms.application.session import WarehouseSession
    from storerooms.contracts.sources import PendingItemSource


@dataclass
class ServiceFactory:
    """Builds the allocation services for one warehouse configuration.

    Services are created lazily and cached so that every service built by
    one factory shares the same store, pending queue and history.

    Example:
        ```python
        factory = ServiceFactory(config=load_config(Path("godown.json")))
        session = factory.create_session()
        session.load_consignment("GC-1001", items)
        ```
    """

    config: WarehouseConfiguration = field(default_factory=default_config)
    clock: Callable[[], datetime] = utc_now

    _registry: RoomRegistry | None = field(default=None, init=False, repr=False)
    _store: SlotStore | None = field(default=None, init=False, repr=False)
    _pending: PendingQueue | None = field(default=None, init=False, repr=False)
    _history: HistoryManager | None = field(default=None, init=False, repr=False)

    def get_registry(self) -> RoomRegistry:
        if self._registry is None:
            self._registry = RoomRegistry(config_to_rooms(self.config))
        return self._registry

    def get_store(self) -> SlotStore:
        if self._store is None:
            self._store = SlotStore(self.get_registry())
        return self._store

    def get_pending_queue(self) -> PendingQueue:
        if self._pending is None:
            self._pending = PendingQueue()
        return self._pending

    def get_history(self) -> HistoryManager:
        if self._history is None:
            self._history = HistoryManager(
                self.get_store(),
                self.get_pending_queue(),
                max_depth=self.config.history_depth,
                clock=self.clock,
            )
        return self._history

    def create_allocation_engine(self) -> AllocationEngine:
        return AllocationEngine(
            self.get_store(),
            self.get_history(),
            self.get_pending_queue(),
            strategies=FillStrategyFactory(),
            placeholder_label=self.config.placeholder_label,
            clock=self.clock,
        )

    def create_capacity_advisor(self) -> CapacityAdvisor:
        return CapacityAdvisor(self.get_store())

    def create_removal_service(self) -> RemovalService:
        return RemovalService(self.get_store(), self.get_history())

    def create_search_index(self) -> SearchIndex:
        return SearchIndex(self.get_store())

    def create_session(
        self, item_source: "PendingItemSource | None" = None
    ) -> "WarehouseSession":
        """Create a session wired to this factory's shared state."""
        from storerooms.application.session import WarehouseSession

        return WarehouseSession(
            registry=self.get_registry(),
            store=self.get_store(),
            pending=self.get_pending_queue(),
            history=self.get_history(),
            engine=self.create_allocation_engine(),
            advisor=self.create_capacity_advisor(),
            removal=self.create_removal_service(),
            search_index=self.create_search_index(),
            default_fill_mode=self.config.default_fill_mode,
            item_source=item_source,
        )


def get_factory(config: WarehouseConfiguration | None = None) -> ServiceFactory:
    """Create a ServiceFactory for ``config`` (the built-in rooms by default)."""
    if config is None:
        return ServiceFactory()
    return ServiceFactory(config=config)
