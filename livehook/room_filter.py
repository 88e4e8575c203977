"""Room identifier allow-list parsed from configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from livehook.utils.logging import get_logger

log = get_logger(__name__)

# Filter entries are unsigned 64-bit; wire room IDs are signed 64-bit.
FILTER_ID_BITS = 64
MAX_FILTER_ID = (1 << FILTER_ID_BITS) - 1

_DIGITS = re.compile(r"[0-9]+")


def to_filter_id(room_id: int) -> int:
    """Narrow a signed wire room ID to the filter's unsigned width.

    Two's complement reinterpretation, the same as a plain signed-to-unsigned
    cast: values are taken modulo 2**64, so ``-1`` becomes ``2**64 - 1``.
    No bounds check is made.
    """
    return room_id & MAX_FILTER_ID


@dataclass(frozen=True)
class RoomFilter:
    """Immutable set of room IDs allowed to trigger notifications."""

    room_ids: frozenset[int]

    def __contains__(self, room_id: object) -> bool:
        if not isinstance(room_id, int):
            return False
        return to_filter_id(room_id) in self.room_ids

    def __len__(self) -> int:
        return len(self.room_ids)

    def allows(self, room_id: int) -> bool:
        return room_id in self

    @classmethod
    def from_ids(cls, room_ids: Iterable[int]) -> RoomFilter:
        return cls(frozenset(room_ids))


def _parse_entry(entry: str) -> int | None:
    entry = entry.strip()
    if not _DIGITS.fullmatch(entry):
        return None
    value = int(entry)
    if value > MAX_FILTER_ID:
        return None
    return value


def parse_room_filter(raw: str | None) -> RoomFilter | None:
    """Parse a comma-separated list of room IDs.

    Entries that are not unsigned 64-bit integers are dropped. Returns None
    when nothing usable remains, meaning every room passes.
    """
    if raw is None:
        return None

    room_ids: set[int] = set()
    for entry in raw.split(","):
        value = _parse_entry(entry)
        if value is None:
            if entry.strip():
                log.debug("room_filter_entry_dropped", entry=entry)
            continue
        room_ids.add(value)

    if not room_ids:
        return None
    return RoomFilter(frozenset(room_ids))
