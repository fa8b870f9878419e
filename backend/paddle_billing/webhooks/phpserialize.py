"""Canonical encoding of webhook fields.

Paddle signs ``serialize()`` of the ``ksort``-ed POST fields, i.e. a PHP
associative array of strings. String lengths in that format count bytes of
the raw value, not characters and not escaped output.
"""
from collections.abc import Mapping


def _string(value: str) -> str:
    return f's:{len(value.encode("utf-8"))}:"{value}";'


def encode(fields: Mapping[str, str]) -> bytes:
    """Serialize ``fields`` (without ``p_signature``) to the signed byte string."""
    keys = sorted(fields, key=lambda k: k.encode("utf-8"))

    parts = [f"a:{len(keys)}:{{"]
    for k in keys:
        parts.append(_string(k))
        parts.append(_string(fields[k]))
    parts.append("}")

    return "".join(parts).encode("utf-8")
