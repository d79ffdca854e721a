"""
Geometry factory interface consumed by the WKB parser.

The parser never builds geometry itself.  It hands ordered coordinate
values to a factory, so any geometry model (the bundled Cartesian one,
Shapely, a projected or spherical model) can be plugged in by
implementing :class:`GeometryFactory`.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Optional, Sequence


class Capability(Enum):
    """Optional features a factory may offer."""
    Z_COORDINATE = "z_coordinate"
    M_COORDINATE = "m_coordinate"


class GeometryFactory(ABC):
    """
    Base class for geometry factories.

    Subclasses set ``support_z`` / ``support_m`` and ``srid`` (or override
    the properties) and implement the constructors.  ``point`` receives Z
    and M by keyword, ``None`` when the record does not carry them; a
    factory may support more ordinates than a given record uses.
    """

    _srid: int = 0
    _support_z: bool = False
    _support_m: bool = False

    @property
    def srid(self) -> int:
        return self._srid

    @property
    def support_z(self) -> bool:
        return self._support_z

    @property
    def support_m(self) -> bool:
        return self._support_m

    def has_capability(self, capability: Capability) -> bool:
        if capability is Capability.Z_COORDINATE:
            return self.support_z
        if capability is Capability.M_COORDINATE:
            return self.support_m
        return False

    @abstractmethod
    def point(self, x: float, y: float, z: Optional[float] = None,
              m: Optional[float] = None) -> Any:
        pass

    @abstractmethod
    def line_string(self, points: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def linear_ring(self, points: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def polygon(self, exterior: Any, interiors: Sequence[Any] = ()) -> Any:
        pass

    @abstractmethod
    def multi_point(self, points: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def multi_line_string(self, line_strings: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def multi_polygon(self, polygons: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def collection(self, geometries: Sequence[Any]) -> Any:
        pass


# Called as resolver(srid, has_z, has_m) once per top-level parse.
FactoryResolver = Callable[[int, bool, bool], GeometryFactory]
