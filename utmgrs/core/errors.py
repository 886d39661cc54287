# utmgrs/core/errors.py
"""
Exception taxonomy for coordinate conversion.

Malformed text is reported through ``ParseFailure`` values, never raised,
unless the caller explicitly asks for the raising ``from_string`` variants.
"""


class UTMError(Exception):
    """Base class for every error raised by utmgrs."""


class CoordinateParseError(UTMError, ValueError):
    def __init__(self, text, reason):
        self.text = text
        self.reason = reason
        super().__init__(f"{text!r} is not a valid coordinate string: {reason}")


class ZoneNotFoundError(UTMError, KeyError):
    """The requested zone designator does not exist on the globe."""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Zone {self.name!r} does not exist in the referenced globe."


class ZoneConsistencyError(UTMError, AssertionError):
    """A resolved zone does not contain the point that produced it."""


class UnsupportedZoneError(UTMError, ValueError):
    """The operation is not defined for this zone (e.g. MGRS lettering at the poles)."""


class GridSquareError(UTMError, ValueError):
    """A 100 km grid square letter pair that the zone's lettering never produces."""


class ParseFailure:
    """
    Result of a failed parse. Falsy, so callers can write ``if not result:``.
    """

    __slots__ = ("text", "reason")

    def __init__(self, text, reason):
        self.text = text
        self.reason = reason

    def __bool__(self):
        return False

    def __eq__(self, other):
        if not isinstance(other, ParseFailure):
            return NotImplemented
        return self.text == other.text and self.reason == other.reason

    def __hash__(self):
        return hash((self.text, self.reason))

    def __repr__(self):
        return f"ParseFailure(text={self.text!r}, reason={self.reason!r})"

    def raise_error(self):
        raise CoordinateParseError(self.text, self.reason)
