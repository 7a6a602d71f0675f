"""Pytest configuration and shared fixtures for warehouse tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, timezone

import pytest

from storerooms.application import ServiceFactory, WarehouseSession
from storerooms.domain import (
    AllocationEngine,
    CapacityAdvisor,
    HistoryManager,
    Occupant,
    PendingItem,
    PendingQueue,
    RemovalService,
    SlotStore,
)

FIXED_TIME = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or REST surfaces end to end"
    )


# =============================================================================
# Shared service fixtures (built-in rooms: A 10x10, B 8x12, C 6x8)
# =============================================================================


@pytest.fixture
def factory() -> ServiceFactory:
    """Factory for the built-in rooms with a frozen clock."""
    return ServiceFactory(clock=lambda: FIXED_TIME)


@pytest.fixture
def store(factory: ServiceFactory) -> SlotStore:
    return factory.get_store()


@pytest.fixture
def pending(factory: ServiceFactory) -> PendingQueue:
    return factory.get_pending_queue()


@pytest.fixture
def history(factory: ServiceFactory) -> HistoryManager:
    return factory.get_history()


@pytest.fixture
def engine(factory: ServiceFactory) -> AllocationEngine:
    return factory.create_allocation_engine()


@pytest.fixture
def advisor(factory: ServiceFactory) -> CapacityAdvisor:
    return factory.create_capacity_advisor()


@pytest.fixture
def removal(factory: ServiceFactory) -> RemovalService:
    return factory.create_removal_service()


@pytest.fixture
def session(factory: ServiceFactory) -> WarehouseSession:
    return factory.create_session()


@pytest.fixture
def occupy(store: SlotStore) -> Callable[[str, Iterable[str]], None]:
    """Mark slots occupied directly in the store, bypassing history.

    Usage: ``occupy("room-a", ["A-R01-C01", "A-R01-C02"])``
    """

    def _occupy(room_id: str, slot_ids: Iterable[str], label: str = "OLD") -> None:
        wanted = set(slot_ids)
        occupant = Occupant(
            content_id="existing",
            display_label=label,
            source_reference="GC-0000",
            contents="Existing stock",
            packing="Box",
            allocated_at=FIXED_TIME,
        )
        store.set(
            room_id,
            [s.occupy(occupant) if s.id in wanted else s for s in store.get(room_id)],
        )

    return _occupy


@pytest.fixture
def rice_items() -> list[PendingItem]:
    return [
        PendingItem(id="1", quantity=3, contents="Rice", packing="Bag", prefix="RICE", weight=150.0),
        PendingItem(id="2", quantity=2, contents="Sugar", packing="Bag", prefix="", weight=100.0),
        PendingItem(id="3", quantity=1, contents="Tea chests", packing="Box", prefix="TEA", weight=20.0),
    ]
