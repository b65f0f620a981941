from __future__ import annotations

import re
import typing as t

Duration = t.Union[int, str]

ACCEPTED_FORMATS: t.Tuple[str, ...] = (
    "integer milliseconds",
    '"<n>s"',
    '"<n>m"',
    '"<n>h"',
    '"<n>d"',
)

_UNITS_MS: t.Dict[str, int] = {
    "s": 1000,
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
}

_DURATION_RE = re.compile(r"([0-9]+)([smhd])")


class InvalidDurationFormat(ValueError):
    """Raised when a TTL is neither an int nor a string like "30s" or "5m"."""

    def __init__(self, value: t.Any) -> None:
        self.value = value
        self.accepted_formats = ACCEPTED_FORMATS
        super().__init__(
            f"Invalid TTL format {value!r}. Use a number of milliseconds "
            'or a string like "1s", "5m", "2h", "1d"'
        )


def resolve_ttl(ttl: Duration) -> int:
    """Convert a TTL into milliseconds.

    Ints pass through unchanged. Strings must be digits followed by a single
    lowercase unit (s, m, h or d); anything else raises InvalidDurationFormat.
    """
    # bool is an int subclass, but True is not a duration
    if isinstance(ttl, int) and not isinstance(ttl, bool):
        return ttl
    if not isinstance(ttl, str):
        raise InvalidDurationFormat(ttl)
    match = _DURATION_RE.fullmatch(ttl)
    if match is None:
        raise InvalidDurationFormat(ttl)
    amount, unit = match.groups()
    return int(amount) * _UNITS_MS[unit]
