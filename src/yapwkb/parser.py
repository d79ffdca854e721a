"""
Well-known binary (WKB) parser.

Parses a geometry from WKB, optionally recognizing PostGIS EWKB type-code
flags and Simple Features 1.2 Z/M type codes.  Create a :class:`WKBParser`
with the desired settings and call :meth:`WKBParser.parse` or
:meth:`WKBParser.parse_hex`::

    >>> from yapwkb import WKBParser
    >>> parser = WKBParser(support_ewkb=True)
    >>> parser.parse_hex('0101000000000000000000f03f0000000000000040')
    Point(x=1.0, y=2.0, z=None, m=None, srid=0)

Configuration options (constructor keywords, or properties set afterwards):

``default_factory``
    Factory for parsed geometries when no factory generator is set.
    Defaults to a 2D :class:`~yapwkb.cartesian.CartesianFactory`.
``factory_generator``
    Callable ``(srid, has_z, has_m) -> GeometryFactory`` invoked once per
    parse with the values of the outermost record.  Overrides
    ``default_factory`` when set.
``support_ewkb``, ``support_wkb12``, ``ignore_extra_bytes``, ``max_depth``
    See :class:`~yapwkb.config.ParserOptions`.

A parser holds configuration only.  Every parse call builds its own
:class:`ParseContext` and :class:`~yapwkb.cursor.ByteCursor`, so one
configured parser can be shared between threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from yapwkb.cartesian import preferred_factory
from yapwkb.config import ParserOptions
from yapwkb.cursor import ByteCursor, BytesLike
from yapwkb.errors import (
    error_dimension_mismatch,
    error_invalid_hex,
    error_missing_capability,
    error_nesting_too_deep,
    error_srid_mismatch,
    error_trailing_data,
    error_type_mismatch,
)
from yapwkb.factory import Capability, FactoryResolver, GeometryFactory
from yapwkb.typecode import GeometryType, TypeCode, decode_type_code

logger = logging.getLogger(__name__)


class Constraint(Enum):
    """What an enclosing record allows in place of a concrete kind."""
    TOPLEVEL = "toplevel"   # outermost record, no container
    ANY = "any"             # geometry collection member


RecordConstraint = Union[Constraint, GeometryType]


@dataclass
class ParseContext:
    """
    State of one parse call.

    The outermost record fixes ``has_z``, ``has_m``, ``srid``, ``dimension``
    and ``factory`` through :meth:`populate`; every nested record is
    checked against them.  ``depth`` tracks the current nesting level.
    """
    options: ParserOptions
    factory: GeometryFactory
    resolver: Optional[FactoryResolver] = None
    has_z: bool = False
    has_m: bool = False
    srid: int = 0
    dimension: int = 2
    depth: int = 0
    populated: bool = False

    def populate(self, type_code: TypeCode, srid: Optional[int], offset: int) -> None:
        if self.populated:
            raise RuntimeError("ParseContext is already populated")
        self.has_z = type_code.has_z
        self.has_m = type_code.has_m
        self.dimension = type_code.dimension
        self.srid = int(srid) if srid is not None else 0
        if self.resolver is not None:
            self.factory = self.resolver(self.srid, self.has_z, self.has_m)
        if self.has_z and not self.factory.has_capability(Capability.Z_COORDINATE):
            raise error_missing_capability("Z", self.factory, offset)
        if self.has_m and not self.factory.has_capability(Capability.M_COORDINATE):
            raise error_missing_capability("M", self.factory, offset)
        self.populated = True


def _kind_name(code: int) -> Union[GeometryType, int]:
    try:
        return GeometryType(code)
    except ValueError:
        return code


def hex_to_bytes(text: Union[str, bytes]) -> bytes:
    """Convert hex text (whitespace allowed) to bytes."""
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode('ascii')
        except UnicodeDecodeError as exc:
            raise error_invalid_hex(repr(bytes(text)), "not ASCII text") from exc
    compact = ''.join(text.split())
    try:
        return bytes.fromhex(compact)
    except ValueError as exc:
        raise error_invalid_hex(compact, str(exc)) from exc


class WKBParser:
    """Configurable WKB/EWKB parser.  See the module docs for options."""

    _HANDLERS = {
        GeometryType.POINT: '_parse_point',
        GeometryType.LINE_STRING: '_parse_line_string',
        GeometryType.POLYGON: '_parse_polygon',
        GeometryType.MULTI_POINT: '_parse_multi_point',
        GeometryType.MULTI_LINE_STRING: '_parse_multi_line_string',
        GeometryType.MULTI_POLYGON: '_parse_multi_polygon',
        GeometryType.GEOMETRY_COLLECTION: '_parse_collection',
    }

    def __init__(self, options: Optional[ParserOptions] = None, *,
                 default_factory: Optional[GeometryFactory] = None,
                 factory_generator: Optional[FactoryResolver] = None,
                 **overrides):
        options = options if options is not None else ParserOptions()
        if overrides:
            options = options.updated(**overrides)
        self._options = options
        self._default_factory = default_factory or preferred_factory()
        self._factory_generator = factory_generator

    def __repr__(self) -> str:
        opts = ', '.join(f"{k}={v!r}" for k, v in self._options.to_dict().items())
        return f"WKBParser({opts})"

    # -- configuration ----------------------------------------------------

    @property
    def options(self) -> ParserOptions:
        return self._options

    @options.setter
    def options(self, value: ParserOptions) -> None:
        self._options = value

    @property
    def default_factory(self) -> GeometryFactory:
        return self._default_factory

    @default_factory.setter
    def default_factory(self, value: Optional[GeometryFactory]) -> None:
        self._default_factory = value or preferred_factory()

    @property
    def factory_generator(self) -> Optional[FactoryResolver]:
        return self._factory_generator

    @factory_generator.setter
    def factory_generator(self, value: Optional[FactoryResolver]) -> None:
        self._factory_generator = value

    def to_generate_factory(self, fn: FactoryResolver) -> FactoryResolver:
        """Set ``fn`` as the factory generator; usable as a decorator."""
        self._factory_generator = fn
        return fn

    @property
    def support_ewkb(self) -> bool:
        return self._options.support_ewkb

    @support_ewkb.setter
    def support_ewkb(self, value: bool) -> None:
        self._options = self._options.updated(support_ewkb=value)

    @property
    def support_wkb12(self) -> bool:
        return self._options.support_wkb12

    @support_wkb12.setter
    def support_wkb12(self, value: bool) -> None:
        self._options = self._options.updated(support_wkb12=value)

    @property
    def ignore_extra_bytes(self) -> bool:
        return self._options.ignore_extra_bytes

    @ignore_extra_bytes.setter
    def ignore_extra_bytes(self, value: bool) -> None:
        self._options = self._options.updated(ignore_extra_bytes=value)

    @property
    def max_depth(self) -> int:
        return self._options.max_depth

    @max_depth.setter
    def max_depth(self, value: int) -> None:
        self._options = self._options.updated(max_depth=value)

    # -- entry points -----------------------------------------------------

    def parse_hex(self, text: Union[str, bytes]) -> Any:
        """Parse hex-encoded WKB and return a geometry object."""
        return self.parse(hex_to_bytes(text))

    def parse(self, data: BytesLike) -> Any:
        """Parse binary WKB and return a geometry object."""
        context = ParseContext(self._options, self._default_factory, self._factory_generator)
        cursor = ByteCursor(data)
        try:
            obj = self._parse_object(cursor, context, Constraint.TOPLEVEL)
            remaining = cursor.remaining()
            if remaining > 0:
                if not context.options.ignore_extra_bytes:
                    raise error_trailing_data(remaining, cursor.offset)
                logger.debug("ignoring %d extra bytes at offset %d", remaining, cursor.offset)
        finally:
            cursor.release()
        return obj

    # -- records ----------------------------------------------------------

    def _parse_object(self, cursor: ByteCursor, context: ParseContext,
                      constraint: RecordConstraint) -> Any:
        start = cursor.offset
        little_endian = cursor.read_byte() == 1
        raw = cursor.read_uint32(little_endian)
        type_code = decode_type_code(
            raw,
            support_ewkb=context.options.support_ewkb,
            support_wkb12=context.options.support_wkb12,
        )
        srid = cursor.read_uint32(little_endian) if type_code.has_srid else None

        if constraint is Constraint.TOPLEVEL:
            context.populate(type_code, srid, start)
            logger.debug(
                "toplevel record: type=%d has_z=%s has_m=%s srid=%d factory=%r",
                type_code.code, context.has_z, context.has_m, context.srid, context.factory,
            )
        else:
            self._check_enclosed(context, type_code, srid, constraint, start)

        kind = GeometryType.from_code(type_code.code, start)
        handler = getattr(self, self._HANDLERS[kind])
        return handler(cursor, context, little_endian)

    def _check_enclosed(self, context: ParseContext, type_code: TypeCode,
                        srid: Optional[int], constraint: RecordConstraint, offset: int) -> None:
        if constraint is not Constraint.ANY and type_code.code != constraint:
            raise error_type_mismatch(constraint, _kind_name(type_code.code), offset)
        if type_code.has_z != context.has_z:
            raise error_dimension_mismatch("Z", context.has_z, type_code.has_z, offset)
        if type_code.has_m != context.has_m:
            raise error_dimension_mismatch("M", context.has_m, type_code.has_m, offset)
        if srid is not None and srid != context.srid:
            raise error_srid_mismatch(context.srid, srid, offset)

    def _read_line_string(self, cursor: ByteCursor, context: ParseContext,
                          little_endian: bool) -> Any:
        count = cursor.read_uint32(little_endian)
        dims = context.dimension
        coords = cursor.read_doubles(little_endian, dims * count)
        return context.factory.line_string(
            [self._make_point(context, coords[dims * i:dims * (i + 1)]) for i in range(count)]
        )

    def _make_point(self, context: ParseContext, ordinates: List[float]) -> Any:
        # ordinates are X, Y[, Z][, M]; Z and M are passed by name
        x, y = ordinates[0], ordinates[1]
        rest = ordinates[2:]
        z = rest.pop(0) if context.has_z else None
        m = rest.pop(0) if context.has_m else None
        return context.factory.point(x, y, z=z, m=m)

    def _parse_members(self, cursor: ByteCursor, context: ParseContext,
                       little_endian: bool, constraint: RecordConstraint) -> List[Any]:
        count = cursor.read_uint32(little_endian)
        if count and context.depth >= context.options.max_depth:
            raise error_nesting_too_deep(context.options.max_depth, cursor.offset)
        context.depth += 1
        try:
            return [self._parse_object(cursor, context, constraint) for _ in range(count)]
        finally:
            context.depth -= 1

    def _parse_point(self, cursor, context, little_endian):
        coords = cursor.read_doubles(little_endian, context.dimension)
        return self._make_point(context, coords)

    def _parse_line_string(self, cursor, context, little_endian):
        return self._read_line_string(cursor, context, little_endian)

    def _parse_polygon(self, cursor, context, little_endian):
        # rings are bare point lists, not records with their own header
        count = cursor.read_uint32(little_endian)
        rings = [self._read_line_string(cursor, context, little_endian) for _ in range(count)]
        exterior = rings.pop(0) if rings else context.factory.linear_ring([])
        return context.factory.polygon(exterior, rings)

    def _parse_multi_point(self, cursor, context, little_endian):
        return context.factory.multi_point(
            self._parse_members(cursor, context, little_endian, GeometryType.POINT))

    def _parse_multi_line_string(self, cursor, context, little_endian):
        return context.factory.multi_line_string(
            self._parse_members(cursor, context, little_endian, GeometryType.LINE_STRING))

    def _parse_multi_polygon(self, cursor, context, little_endian):
        return context.factory.multi_polygon(
            self._parse_members(cursor, context, little_endian, GeometryType.POLYGON))

    def _parse_collection(self, cursor, context, little_endian):
        return context.factory.collection(
            self._parse_members(cursor, context, little_endian, Constraint.ANY))


def parse_wkb(data: BytesLike, **options) -> Any:
    """Parse binary WKB with a one-off :class:`WKBParser`."""
    return WKBParser(**options).parse(data)


def parse_wkb_hex(text: Union[str, bytes], **options) -> Any:
    """Parse hex-encoded WKB with a one-off :class:`WKBParser`."""
    return WKBParser(**options).parse_hex(text)
