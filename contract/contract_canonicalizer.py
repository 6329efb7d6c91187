import json
from typing import Any


def sort_keys_deep(value: Any) -> Any:
    """
    Rewrite a JSON value so that every object has its keys in sorted order.

    Arrays keep their element order; each element is rewritten recursively.
    Integral floats become ints so that 1 and 1.0 compare equal.
    """
    if isinstance(value, (list, tuple)):
        return [sort_keys_deep(item) for item in value]
    if isinstance(value, dict):
        return {key: sort_keys_deep(value[key]) for key in sorted(value)}
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def canonicalize(value: Any) -> str:
    """
    Serialize a JSON value to its canonical text form.

    Two values that differ only in object key order produce the same string;
    a difference in array order or in any primitive produces a different one.
    """
    return json.dumps(sort_keys_deep(value), separators=(",", ":"), ensure_ascii=False)
