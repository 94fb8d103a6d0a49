from dataclasses import dataclass, field
from functools import singledispatch
from typing import Any, Protocol, runtime_checkable


DJB2_SEED = 5381
WORD_MASK = (1 << 64) - 1


@runtime_checkable
class Hashable(Protocol):
    def hash(self) -> int:
        ...


def djb2(data: bytes | bytearray | memoryview) -> int:
    hash = DJB2_SEED
    for c in bytes(data):
        # wraps like an unsigned 64-bit word
        hash = (hash * 33 + c) & WORD_MASK
    return hash


@singledispatch
def hash_key(key: Any) -> int:
    if isinstance(key, Hashable):
        return key.hash()
    raise TypeError(f"unhashable key type: {type(key).__name__}")


@hash_key.register
def _(key: str) -> int:
    return djb2(key.encode("utf-8"))


@hash_key.register(bytes)
@hash_key.register(bytearray)
@hash_key.register(memoryview)
def _(key) -> int:
    return djb2(key)


@dataclass(frozen=True)
class Key:
    value: str
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_hash", hash_key(self.value))

    def hash(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return self.value