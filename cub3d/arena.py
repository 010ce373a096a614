"""Block-scoped tracking of allocated objects, released together on cleanup."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

ALL_BLOCKS = -1


class MemType(enum.IntEnum):
    """Kind of a tracked object."""

    PTR = 0
    PTR_PROTECTED = 1
    ARRAY = 2
    ARRAY_PROTECTED = 3


@dataclass(frozen=True)
class Entry:
    """One tracked object together with the block it belongs to."""

    obj: Any
    block: int
    type: MemType = MemType.PTR


class Arena:
    """Keeps track of objects by block so whole blocks can be released at once.

    Entries are kept newest first.
    """

    def __init__(self) -> None:
        self._entries: list[Entry] = []

    def _add(self, obj: Any, block: int, mem_type: MemType) -> Any:
        self._entries.insert(0, Entry(obj, block, mem_type))
        return obj

    def allocate(self, block: int, size: int) -> bytearray:
        """Return a new buffer of ``size`` bytes tracked under ``block``."""
        if size < 0:
            raise ValueError(f"negative allocation size: {size}")
        return self._add(bytearray(size), block, MemType.PTR)

    def allocate_zeroed(self, block: int, nmemb: int, size: int) -> bytearray:
        """Return a zero-filled buffer of ``nmemb * size`` bytes tracked under ``block``."""
        if nmemb < 0 or size < 0:
            raise ValueError(f"negative allocation size: {nmemb} x {size}")
        return self._add(bytearray(nmemb * size), block, MemType.PTR)

    def track(self, obj: Any, block: int) -> Any:
        """Track an existing object under ``block`` and return it."""
        return self._add(obj, block, MemType.PTR)

    def track_array(self, array: Any, block: int) -> Any:
        """Track an existing array object under ``block`` and return it."""
        return self._add(array, block, MemType.ARRAY)

    def _index_of(self, obj: Any) -> int:
        for index, entry in enumerate(self._entries):
            if entry.obj is obj:
                return index
        raise KeyError("object is not tracked by this arena")

    def free(self, obj: Any) -> Entry:
        """Stop tracking ``obj`` and return its entry; raises KeyError if it is not tracked."""
        index = self._index_of(obj)
        removed = self._entries.pop(index)
        return removed

    def cleanup(self, block: int) -> None:
        """Release every object in ``block``, or all of them for ALL_BLOCKS."""
        for entry in [e for e in self._entries if block == ALL_BLOCKS or e.block == block]:
            self.free(entry.obj)

    def terminate(self, verbose: bool = False) -> None:
        """Release everything; when verbose, print what was still tracked."""
        if verbose:
            print(self.describe("Memory that wasn't manually freed:\n"), end="")
        self.cleanup(ALL_BLOCKS)

    def describe(self, head: str) -> str:
        """Return a listing of tracked objects under the heading ``head``."""
        lines = [head]
        lines.extend(f"ptr {hex(id(e.obj))} in block {e.block}" for e in self._entries)
        return "\n".join(lines) + "\n\n"

    def entries(self) -> tuple[Entry, ...]:
        """Return the tracked entries, newest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __enter__(self) -> Arena:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.terminate(False)