import sys

from .shared import printf, printf_err
from .table import HashMap, InsertError


DEFAULT_CAPACITY = 5


def insert_or_exit(h: HashMap[str, str], key: str, value: str):
    result = h.insert(key, value)
    if isinstance(result, InsertError):
        printf_err("ERROR: {0:s}\n", result.message)
        sys.exit(70)


def run_demo(capacity: int):
    h: HashMap[str, str] = HashMap.with_capacity(capacity)
    for key in ("a", "b", "c", "d", "e"):
        insert_or_exit(h, key, key)
    h.display()

    h.delete("e")
    h.display()

    insert_or_exit(h, "f", "f")
    h.display()


def parse_capacity(arg: str) -> int | None:
    try:
        capacity = int(arg)
    except ValueError:
        return None
    if capacity < 0:
        return None
    return capacity


def usage():
    printf("Usage: oamap [capacity]\n")
    sys.exit(64)


def main():
    if len(sys.argv) == 1:
        run_demo(DEFAULT_CAPACITY)
    elif len(sys.argv) == 2:
        capacity = parse_capacity(sys.argv[1])
        if capacity is None:
            usage()
        else:
            run_demo(capacity)
    else:
        usage()
