from .hashing import Hashable, Key, djb2, hash_key
from .table import (
    DuplicateKey,
    Full,
    HashMap,
    InsertError,
    InsertOk,
    InsertResult,
    NotFound,
)
