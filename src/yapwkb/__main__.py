#!/usr/bin/env python3
"""
Command line front end for the yapWKB parser.

Usage:
    python -m yapwkb decode HEX [--ewkb] [--wkb12] [--ignore-extra-bytes] [--json]
    python -m yapwkb decode --file PATH [--config OPTIONS.yaml]
    python -m yapwkb inspect HEX

Examples:
    # Decode a little-endian point
    python -m yapwkb decode 0101000000000000000000f03f0000000000000040

    # Decode PostGIS EWKB with SRID, printing GeoJSON-like output
    python -m yapwkb decode --ewkb --json 0101000020E6100000000000000000244000000000000014C0

    # Show the header of the outermost record only
    python -m yapwkb inspect 01E9030000000000000000F03F00000000000000400000000000000840
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from yapwkb.cartesian import cartesian_resolver
from yapwkb.config import ParserOptions, load_options
from yapwkb.cursor import ByteCursor
from yapwkb.errors import WKBParseError
from yapwkb.parser import WKBParser, hex_to_bytes
from yapwkb.typecode import decode_type_code

logger = logging.getLogger(__name__)


def _read_payload(args) -> bytes:
    if args.file:
        data = Path(args.file).read_bytes()
        logger.debug("read %d bytes from %s", len(data), args.file)
        return data
    if not args.hex:
        raise ValueError("either HEX or --file is required")
    return hex_to_bytes(args.hex)


def _options(args) -> ParserOptions:
    options = load_options(args.config) if args.config else ParserOptions()
    changes = {}
    if args.ewkb:
        changes['support_ewkb'] = True
    if args.wkb12:
        changes['support_wkb12'] = True
    if args.ignore_extra_bytes:
        changes['ignore_extra_bytes'] = True
    if args.max_depth is not None:
        changes['max_depth'] = args.max_depth
    return options.updated(**changes) if changes else options


def describe(geom) -> str:
    """One-line summary of a Cartesian geometry."""
    kind = geom.geometry_type.title
    if geom.is_empty():
        return f"{kind} EMPTY (srid={geom.srid})"
    if hasattr(geom, 'coords'):
        detail = ' '.join(f"{c:g}" for c in geom.coords)
    elif hasattr(geom, 'rings'):
        detail = f"{len(geom.rings)} ring(s), {len(geom.exterior)} exterior point(s)"
    elif hasattr(geom, 'geoms'):
        detail = f"{len(geom.geoms)} member(s)"
    else:
        detail = f"{len(geom)} point(s)"
    return f"{kind} ({detail}) srid={geom.srid}"


def cmd_decode(args):
    """Decode one payload and print it."""
    try:
        parser = WKBParser(_options(args), factory_generator=cartesian_resolver)
        geom = parser.parse(_read_payload(args))
    except WKBParseError as e:
        print(e.format(), file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(geom.to_dict(), indent=2))
    else:
        print(describe(geom))
    return 0


def cmd_inspect(args):
    """Print the header of the outermost record."""
    try:
        cursor = ByteCursor(hex_to_bytes(args.hex))
        order = cursor.read_byte()
        little_endian = order == 1
        raw = cursor.read_uint32(little_endian)
        ewkb = decode_type_code(raw, support_ewkb=True, support_wkb12=True)
        srid = cursor.read_uint32(little_endian) if ewkb.has_srid else None
    except WKBParseError as e:
        print(e.format(), file=sys.stderr)
        return 1

    print(f"byte order: {'little' if little_endian else 'big'} endian (flag {order})")
    print(f"raw type:   {raw} (0x{raw:08X})")
    print(f"geometry:   {ewkb.code}")
    print(f"has Z:      {ewkb.has_z}")
    print(f"has M:      {ewkb.has_m}")
    print(f"srid:       {srid if srid is not None else '(none)'}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='yapwkb',
        description='Decode WKB, EWKB and SFS 1.2 geometry payloads',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    decode_parser = subparsers.add_parser('decode', help='Decode a payload')
    decode_parser.add_argument('hex', nargs='?', help='Hex-encoded payload')
    decode_parser.add_argument('--file', '-f', help='Read the raw binary payload from a file')
    decode_parser.add_argument('--config', '-c', help='YAML file with parser options')
    decode_parser.add_argument('--ewkb', action='store_true', help='Accept PostGIS EWKB flags')
    decode_parser.add_argument('--wkb12', action='store_true', help='Accept SFS 1.2 type codes')
    decode_parser.add_argument('--ignore-extra-bytes', action='store_true',
                               help='Accept trailing bytes after the geometry')
    decode_parser.add_argument('--max-depth', type=int, help='Maximum nesting depth')
    decode_parser.add_argument('--json', action='store_true', help='Print GeoJSON-like output')

    inspect_parser = subparsers.add_parser('inspect', help='Show the outermost record header')
    inspect_parser.add_argument('hex', help='Hex-encoded payload')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    if args.command == 'decode':
        return cmd_decode(args)
    elif args.command == 'inspect':
        return cmd_inspect(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
