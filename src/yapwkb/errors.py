"""
WKB parser exceptions.

Error code ranges:
- W0xx: Input errors (byte stream, hex text)
- W1xx: Type code errors
- W2xx: Consistency errors between an enclosing and an enclosed record
- W3xx: Decode-call errors (factory capabilities, trailing data, nesting)
"""

from typing import Any, List, Optional


class WKBParseError(ValueError):
    """Base exception for WKB parse failures."""

    code = "W000"

    def __init__(self, message: str, offset: Optional[int] = None,
                 hints: Optional[List[str]] = None):
        self.message = message
        self.offset = offset
        self.hints = list(hints or [])
        super().__init__(message)

    def format(self) -> str:
        """Format the error for display."""
        where = f" at byte {self.offset}" if self.offset is not None else ""
        parts = [f"error[{self.code}]{where}: {self.message}"]
        for hint in self.hints:
            parts.append(f"    = hint: {hint}")
        return "\n".join(parts)

    def __str__(self) -> str:
        return self.format()


class _MismatchError(WKBParseError):
    """A nested record disagrees with its container or the top-level record."""

    def __init__(self, message: str, expected: Any, actual: Any,
                 offset: Optional[int] = None, hints: Optional[List[str]] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message, offset, hints)


class TruncatedInputError(WKBParseError):
    """Not enough bytes left to satisfy a read (W001)."""
    code = "W001"


class InvalidHexInputError(WKBParseError):
    """Hex text could not be converted to bytes (W002)."""
    code = "W002"


class UnknownTypeCodeError(WKBParseError):
    """Type code outside the supported geometry kinds (W101)."""
    code = "W101"

    def __init__(self, message: str, type_code: int, offset: Optional[int] = None,
                 hints: Optional[List[str]] = None):
        self.type_code = type_code
        super().__init__(message, offset, hints)


class UnsupportedTypeCodeError(UnknownTypeCodeError):
    """Recognized SFS 1.2 type that this parser does not decode (W102)."""
    code = "W102"


class TypeMismatchError(_MismatchError):
    """Multi-geometry member of the wrong kind (W201)."""
    code = "W201"


class DimensionalityMismatchError(_MismatchError):
    """Nested record with Z/M flags different from the top level (W202)."""
    code = "W202"


class SridMismatchError(_MismatchError):
    """Nested record with an SRID different from the top level (W203)."""
    code = "W203"


class UnsupportedCapabilityError(WKBParseError):
    """Resolved factory cannot represent the decoded ordinates (W301)."""
    code = "W301"


class TrailingDataError(WKBParseError):
    """Bytes left over after the top-level record (W302)."""
    code = "W302"

    def __init__(self, message: str, remaining: int, offset: Optional[int] = None,
                 hints: Optional[List[str]] = None):
        self.remaining = remaining
        super().__init__(message, offset, hints)


class NestingTooDeepError(WKBParseError):
    """Collections nested beyond the configured limit (W303)."""
    code = "W303"


# --- Input errors ---

def error_truncated(what: str, needed: int, available: int, offset: int) -> TruncatedInputError:
    """W001: Not enough bytes left."""
    return TruncatedInputError(
        f"not enough bytes left to fulfill {what}: need {needed}, have {available}",
        offset,
    )


def error_invalid_hex(text: str, reason: str) -> InvalidHexInputError:
    """W002: Malformed hex text."""
    preview = text if len(text) <= 32 else text[:29] + "..."
    return InvalidHexInputError(
        f"invalid hex input '{preview}': {reason}",
        hints=["hex input must contain an even number of 0-9, a-f digits"],
    )


# --- Type code errors ---

def error_unknown_type(type_code: int, offset: int) -> UnknownTypeCodeError:
    """W101: Unknown type value."""
    hints = []
    if type_code > 0x0FFFFFFF:
        hints.append("high bits are set; enable support_ewkb for PostGIS EWKB input")
    elif type_code > 1000:
        hints.append("type code above 1000; enable support_wkb12 for SFS 1.2 Z/M codes")
    return UnknownTypeCodeError(f"unknown type value: {type_code}", type_code, offset, hints)


def error_unsupported_type(type_code: int, name: str, offset: int) -> UnsupportedTypeCodeError:
    """W102: SFS 1.2 solid type."""
    return UnsupportedTypeCodeError(
        f"{name} (type {type_code}) is not supported",
        type_code,
        offset,
    )


# --- Consistency errors ---

def error_type_mismatch(expected, actual, offset: int) -> TypeMismatchError:
    """W201: Enclosed type differs from the container constraint."""
    return TypeMismatchError(
        f"enclosed type={str(actual)} is different from container constraint {str(expected)}",
        expected, actual, offset,
    )


def error_dimension_mismatch(ordinate: str, expected: bool, actual: bool,
                             offset: int) -> DimensionalityMismatchError:
    """W202: Enclosed hasZ/hasM differs from the top level."""
    return DimensionalityMismatchError(
        f"enclosed has{ordinate}={actual} is different from toplevel has{ordinate}={expected}",
        expected, actual, offset,
    )


def error_srid_mismatch(expected: int, actual: int, offset: int) -> SridMismatchError:
    """W203: Enclosed SRID differs from the top level."""
    shown = expected if expected else "(unspecified)"
    return SridMismatchError(
        f"enclosed SRID {actual} is different from toplevel SRID {shown}",
        expected, actual, offset,
    )


# --- Decode-call errors ---

def error_missing_capability(ordinate: str, factory, offset: int) -> UnsupportedCapabilityError:
    """W301: Factory lacks Z or M support."""
    return UnsupportedCapabilityError(
        f"data has {ordinate} coordinates but {type(factory).__name__} "
        f"doesn't have {ordinate.lower()}_coordinate capability",
        offset,
        hints=["configure a factory_generator, or a default_factory that supports it"],
    )


def error_trailing_data(remaining: int, offset: int) -> TrailingDataError:
    """W302: Extra bytes at the end of the stream."""
    return TrailingDataError(
        f"found {remaining} extra bytes at the end of the stream",
        remaining,
        offset,
        hints=["set ignore_extra_bytes to accept padded input"],
    )


def error_nesting_too_deep(limit: int, offset: int) -> NestingTooDeepError:
    """W303: Nesting beyond max_depth."""
    return NestingTooDeepError(
        f"geometry nesting exceeds the maximum depth of {limit}",
        offset,
    )
