"""Parsing of Go-style duration strings such as ``10ms``, ``1.5s`` or ``1m30s``."""

import re

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # micro sign
    "μs": 1e-6,  # greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)"
_COMPONENT_RE = re.compile(_COMPONENT)
_DURATION_RE = re.compile(rf"(?:{_COMPONENT})+")


def parse_duration(value: str) -> float:
    """Parse a duration string into seconds.

    Accepts one or more ``<number><unit>`` components with units
    ``ns``, ``us``/``µs``, ``ms``, ``s``, ``m`` and ``h``, or a bare ``0``.

    Args:
        value: Duration string, e.g. ``"250ms"`` or ``"1h2m3.5s"``

    Returns:
        Duration in seconds

    Raises:
        ValueError: If the string is empty, malformed or negative
    """
    text = value.strip()
    if not text:
        raise ValueError("empty duration")
    if text.startswith("-"):
        raise ValueError("negative duration")
    if text.startswith("+"):
        text = text[1:]
    if text == "0":
        return 0.0
    if not _DURATION_RE.fullmatch(text):
        raise ValueError("invalid duration")

    return sum(
        float(number) * _UNIT_SECONDS[unit]
        for number, unit in _COMPONENT_RE.findall(text)
    )
