from dataclasses import dataclass, field
from typing import ClassVar, Generic, TypeVar

from .hashing import hash_key
from .shared import printf, printf_err


K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class InsertOk:
    pass


@dataclass(frozen=True)
class InsertError:
    message: ClassVar[str] = "insert failed"


@dataclass(frozen=True)
class Full(InsertError):
    message: ClassVar[str] = "hash map is full"


@dataclass(frozen=True)
class DuplicateKey(InsertError):
    message: ClassVar[str] = "can only insert unique key"


InsertResult = InsertOk | Full | DuplicateKey


DISPLAY_RULE = "-" * 45
EMPTY_SLOT = "..."


@dataclass
class HashMap(Generic[K, V]):
    """Fixed-capacity map with open addressing and linear probing.

    Lookup, delete and the duplicate check on insert only look at the
    primary slot of a key. A key that insert moved further along the probe
    chain can't be found again by lookup, and inserting it twice is not
    detected.
    """

    keys: list[K | None] = field(default_factory=list)
    values: list[V | None] = field(default_factory=list)
    count: int = 0
    trace: bool = False

    @classmethod
    def empty(cls, trace: bool = False) -> "HashMap[K, V]":
        return cls(trace=trace)

    @classmethod
    def with_capacity(cls, size: int, trace: bool = False) -> "HashMap[K, V]":
        if size < 0:
            raise ValueError(f"capacity must not be negative, got {size}")
        return cls(
            keys=[None for _ in range(size)],
            values=[None for _ in range(size)],
            count=0,
            trace=trace,
        )

    @property
    def capacity(self) -> int:
        return len(self.keys)

    def __len__(self) -> int:
        return self.count

    def primary_index(self, key: K) -> int:
        if not self.keys:
            raise ValueError("a map with capacity 0 has no slots")
        return hash_key(key) % len(self.keys)

    def is_occupied(self, index: int) -> bool:
        return self.keys[index] is not None

    def insert(self, key: K, value: V) -> InsertResult:
        if self.count == len(self.keys):
            self._trace(
                "insert {0!s}: full ({1:d}/{2:d})\n", key, self.count, len(self.keys)
            )
            return Full()

        index = self.primary_index(key)
        if self._key_exists(key, index):
            self._trace("insert {0!s}: duplicate at {1:d}\n", key, index)
            return DuplicateKey()

        slot = index
        while self.keys[slot] is not None:
            slot = (slot + 1) % len(self.keys)

        self._trace("insert {0!s}: primary {1:d}, stored at {2:d}\n", key, index, slot)
        self._insert_into(slot, key, value)
        self.count += 1
        return InsertOk()

    def lookup(self, key: K) -> V | None | NotFound:
        if self.count == 0:
            self._trace("lookup {0!s}: map is empty\n", key)
            return NotFound()

        index = self.primary_index(key)
        if self.keys[index] is None:
            self._trace("lookup {0!s}: slot {1:d} is empty\n", key, index)
            return NotFound()

        # the resident key is not compared with the one asked for
        self._trace("lookup {0!s}: found in slot {1:d}\n", key, index)
        return self.values[index]

    def delete(self, key: K) -> None:
        if self.count == 0:
            self._trace("delete {0!s}: map is empty\n", key)
            return

        index = self.primary_index(key)
        if self.keys[index] is None:
            self._trace("delete {0!s}: slot {1:d} already empty\n", key, index)
            return

        self._trace("delete {0!s}: cleared slot {1:d}\n", key, index)
        self.keys[index] = None
        self.values[index] = None
        self.count -= 1

    def dump(self) -> list[str]:
        lines = []
        for key, value in zip(self.keys, self.values):
            if key is None:
                lines.append(EMPTY_SLOT)
            else:
                lines.append(f"{key} -- {value}")
        return lines

    def display(self):
        printf("{0:s}\n", DISPLAY_RULE)
        for line in self.dump():
            printf("{0:s}\n", line)
        printf("{0:s}\n", DISPLAY_RULE)

    def _key_exists(self, key: K, index: int) -> bool:
        resident = self.keys[index]
        return resident is not None and resident == key

    def _insert_into(self, index: int, key: K, value: V):
        self.keys[index] = key
        self.values[index] = value

    def _trace(self, format: str, *args):
        if self.trace:
            printf_err(format, *args)
