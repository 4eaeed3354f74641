"""Conversion of container statistics values to numbers for graphs."""

from __future__ import annotations

from typing import Any


def _parse_float(text: str) -> float:
    if text != text.strip() or "_" in text or not text:
        raise ValueError(f"invalid number: {text!r}")
    try:
        return float(text)
    except ValueError:
        pass
    body = text.lstrip("+-")
    if body[:2].lower() == "0x":
        return float.fromhex(text)
    raise ValueError(f"invalid number: {text!r}")


def to_float(value: Any) -> float:
    """Return ``value`` as a float.

    Numbers are converted directly and strings (or bytes) are parsed; other
    values raise TypeError and unparsable text raises ValueError.
    """
    if isinstance(value, bool) or value is None:
        raise TypeError(f"Can't convert {type(value).__name__} to float64")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return _parse_float(value)
    if isinstance(value, (bytes, bytearray)):
        return _parse_float(bytes(value).decode())
    if hasattr(value, "__float__"):
        return float(value)
    raise TypeError(f"Can't convert {type(value).__name__} to float64")