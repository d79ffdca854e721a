# -*- coding: utf-8 -*-
"""Well-known binary (WKB, EWKB, SFS 1.2) geometry parser."""

from importlib.metadata import PackageNotFoundError, version

from .cartesian import CartesianFactory, cartesian_resolver, preferred_factory
from .config import EWKB, WKB, WKB12, ParserOptions, load_options
from .errors import (
    DimensionalityMismatchError,
    InvalidHexInputError,
    NestingTooDeepError,
    SridMismatchError,
    TrailingDataError,
    TruncatedInputError,
    TypeMismatchError,
    UnknownTypeCodeError,
    UnsupportedCapabilityError,
    UnsupportedTypeCodeError,
    WKBParseError,
)
from .factory import Capability, FactoryResolver, GeometryFactory
from .parser import WKBParser, parse_wkb, parse_wkb_hex
from .typecode import GeometryType, decode_type_code

try:
    __version__ = version("yapWKB")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    "WKBParser",
    "parse_wkb",
    "parse_wkb_hex",
    "ParserOptions",
    "load_options",
    "WKB",
    "WKB12",
    "EWKB",
    "GeometryType",
    "decode_type_code",
    "GeometryFactory",
    "FactoryResolver",
    "Capability",
    "CartesianFactory",
    "cartesian_resolver",
    "preferred_factory",
    "WKBParseError",
    "TruncatedInputError",
    "InvalidHexInputError",
    "UnknownTypeCodeError",
    "UnsupportedTypeCodeError",
    "TypeMismatchError",
    "DimensionalityMismatchError",
    "SridMismatchError",
    "UnsupportedCapabilityError",
    "TrailingDataError",
    "NestingTooDeepError",
]
