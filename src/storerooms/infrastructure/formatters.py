"""Plain-text formatters for rooms, slots and pending items."""

from __future__ import annotations

from collections.abc import Sequence

from storerooms.domain import PendingItem, Room, RoomStats, Slot


class GridFormatter:
    """Formats ASCII maps of a room's slot grid.

    Empty slots print as ``.``, occupied slots as ``#``, and occupied slots
    matching an active search as ``*``.
    """

    EMPTY = "."
    OCCUPIED = "#"
    MATCH = "*"

    def format(
        self,
        room: Room,
        slots: Sequence[Slot],
        highlight: frozenset[str] | set[str] = frozenset(),
    ) -> str:
        header = "     " + " ".join(f"{c:02d}" for c in range(1, room.columns + 1))
        lines = [f"{room.name} [{room.short_code}]", header]
        by_row: dict[int, list[Slot]] = {}
        for slot in slots:
            by_row.setdefault(slot.row, []).append(slot)
        for row in range(1, room.rows + 1):
            cells = [
                self._cell(slot, highlight)
                for slot in sorted(by_row.get(row, []), key=lambda s: s.column)
            ]
            lines.append(f"R{row:02d}  " + "  ".join(cells))
        return "\n".join(lines)

    def _cell(self, slot: Slot, highlight: frozenset[str] | set[str]) -> str:
        if slot.is_empty:
            return self.EMPTY
        if slot.id in highlight:
            return self.MATCH
        return self.OCCUPIED


class StatsFormatter:
    """Formats one-line capacity summaries."""

    def format(self, room: Room, stats: RoomStats) -> str:
        return (
            f"{room.id:<10} {room.name:<26} {room.rows:>2}x{room.columns:<2} "
            f"free {stats.free:>3}/{stats.total:<3} ({stats.percent_free}%)  "
            f"used {stats.occupied}"
        )


class SlotDetailFormatter:
    """Formats the occupant details of a slot."""

    def format(self, slot: Slot) -> str:
        if slot.occupant is None:
            return f"Slot {slot.id}: empty"
        occupant = slot.occupant
        return (
            f"Slot {slot.id}: {occupant.display_label or 'Package'} "
            f"(GC#{occupant.source_reference or 'N/A'}) "
            f"{occupant.contents} / {occupant.packing} "
            f"at {occupant.allocated_at.isoformat()}"
        )


class PendingItemsFormatter:
    """Formats the pending items list as a table."""

    def format(self, items: Sequence[PendingItem]) -> str:
        if not items:
            return "No pending items."
        lines = [
            f"{'ID':<8} {'QTY':>4} {'PREFIX':<10} {'PACKING':<10} {'WEIGHT':>8}  CONTENTS",
            "-" * 64,
        ]
        for item in items:
            lines.append(
                f"{item.id:<8} {item.quantity:>4} {item.prefix:<10} "
                f"{item.packing:<10} {item.weight:>8.1f}  {item.contents}"
            )
        lines.append("-" * 64)
        lines.append(f"Total slots needed: {sum(i.quantity for i in items)}")
        return "\n".join(lines)

