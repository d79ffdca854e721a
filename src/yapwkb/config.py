"""Parser options and YAML option files."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

DEFAULT_MAX_DEPTH = 64
OPTIONS_SECTION = "wkb"


@dataclass(frozen=True)
class ParserOptions:
    """
    Dialect and strictness switches for :class:`yapwkb.parser.WKBParser`.

    ``support_ewkb``
        Accept PostGIS EWKB high-bit Z, M and SRID flags.
    ``support_wkb12``
        Accept SFS 1.2 type codes (1000 = Z, 2000 = M, 3000 = ZM).
    ``ignore_extra_bytes``
        Accept input with bytes after the top-level record.
    ``max_depth``
        Deepest allowed nesting of multi-geometries and collections.
    """
    support_ewkb: bool = False
    support_wkb12: bool = False
    ignore_extra_bytes: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        for name in ("support_ewkb", "support_wkb12", "ignore_extra_bytes"):
            object.__setattr__(self, name, bool(getattr(self, name)))
        depth = int(self.max_depth)
        if depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        object.__setattr__(self, "max_depth", depth)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParserOptions":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown parser option(s): {', '.join(unknown)}")
        return cls(**dict(data))

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def updated(self, **changes) -> "ParserOptions":
        unknown = sorted(set(changes) - {f.name for f in fields(self)})
        if unknown:
            raise ValueError(f"unknown parser option(s): {', '.join(unknown)}")
        return replace(self, **changes)


WKB = ParserOptions()
WKB12 = ParserOptions(support_wkb12=True)
EWKB = ParserOptions(support_ewkb=True, support_wkb12=True)


def load_options(path: Union[str, Path]) -> ParserOptions:
    """Read options from a YAML file.

    Keys may sit at the top level or under a ``wkb:`` section; an empty
    file gives the defaults.
    """
    with Path(path).open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: expected a mapping of parser options")
    if OPTIONS_SECTION in data:
        data = data[OPTIONS_SECTION] or {}
        if not isinstance(data, Mapping):
            raise ValueError(f"{path}: '{OPTIONS_SECTION}' must be a mapping")
    return ParserOptions.from_mapping(data)
