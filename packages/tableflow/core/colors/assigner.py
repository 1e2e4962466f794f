"""Resource color assignment.

A resource keeps the palette slot the caller persisted for it. Resources
without one get a slot derived from a rolling hash of their id, which is
plain integer arithmetic and therefore identical across processes and
reimplementations (unlike ``hash()``, which is seeded per process).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from tableflow.core.colors.palette import TABLE_PALETTE, PaletteEntry

logger = logging.getLogger(__name__)

_HASH_MULTIPLIER = 31
_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


class ResourceRef(BaseModel):
    """Resource metadata needed for coloring.

    Attributes:
        id: Resource identifier.
        label: Display label.
        color_index: Persisted palette slot, or None if never assigned.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    label: str = ""
    color_index: int | None = Field(default=None, description="Persisted palette slot")


def hash_resource_id(resource_id: str) -> int:
    """Signed 32-bit polynomial hash (``h = h * 31 + code_point``).

    Example:
        >>> hash_resource_id("")
        0
        >>> hash_resource_id("ab")
        3105
    """
    h = 0
    for ch in resource_id:
        h = (h * _HASH_MULTIPLIER + ord(ch)) & _INT32_MASK
    # Reinterpret as signed
    return h - (1 << 32) if h & _INT32_SIGN else h


class ResourceColorAssigner:
    """Maps resource ids to palette entries.

    Explicit slots win and wrap around the palette when stale data points
    past its end. Everything else falls back to the id hash.

    Example:
        >>> assigner = ResourceColorAssigner()
        >>> assigner.color_for("T5", explicit_index=2).name
        'amber'
        >>> assigner.suggest_next_index([0, 1, 3])
        2
    """

    def __init__(self, palette: Sequence[PaletteEntry] = TABLE_PALETTE) -> None:
        """Initialize the assigner.

        Args:
            palette: Ordered palette. Defaults to the 12-color table palette.

        Raises:
            ValueError: If the palette is empty.
        """
        if not palette:
            raise ValueError("palette must contain at least one entry")
        self._palette = tuple(palette)

    @property
    def palette(self) -> tuple[PaletteEntry, ...]:
        return self._palette

    def index_for(self, resource_id: str, explicit_index: int | None = None) -> int:
        """Palette slot for a resource (explicit slot wrapped, else hashed)."""
        size = len(self._palette)
        if explicit_index is not None:
            return abs(explicit_index) % size
        return abs(hash_resource_id(resource_id)) % size

    def color_for(self, resource_id: str, explicit_index: int | None = None) -> PaletteEntry:
        """Palette entry for a resource.

        Args:
            resource_id: Resource identifier; any string, including empty.
            explicit_index: Persisted slot, if the resource has one.

        Returns:
            The palette entry. Never raises for any id or index.
        """
        return self._palette[self.index_for(resource_id, explicit_index)]

    def suggest_next_index(self, existing: Iterable[int | None]) -> int:
        """Suggest a palette slot for a newly created resource.

        Args:
            existing: Persisted slots of the current resources (None for
                resources without one).

        Returns:
            The lowest unused slot, or ``len(existing) % palette size`` when
            every slot is taken.
        """
        assignments = list(existing)
        used = {index for index in assignments if index is not None}

        for index in range(len(self._palette)):
            if index not in used:
                return index

        return len(assignments) % len(self._palette)

    def build_color_map(self, resources: Iterable[ResourceRef]) -> dict[str, PaletteEntry]:
        """Map each resource id to its palette entry."""
        color_map = {
            resource.id: self.color_for(resource.id, resource.color_index)
            for resource in resources
        }
        logger.debug("Built color map for %d resources", len(color_map))
        return color_map


_DEFAULT_ASSIGNER = ResourceColorAssigner()


def color_for(resource_id: str, explicit_index: int | None = None) -> PaletteEntry:
    """Palette entry for a resource using the table palette."""
    return _DEFAULT_ASSIGNER.color_for(resource_id, explicit_index)


def suggest_next_index(existing: Iterable[int | None]) -> int:
    """Suggest a table palette slot for a new resource."""
    return _DEFAULT_ASSIGNER.suggest_next_index(existing)


def build_color_map(resources: Iterable[ResourceRef]) -> dict[str, PaletteEntry]:
    """Map resource ids to table palette entries."""
    return _DEFAULT_ASSIGNER.build_color_map(resources)


__all__ = [
    "ResourceColorAssigner",
    "ResourceRef",
    "build_color_map",
    "color_for",
    "hash_resource_id",
    "suggest_next_index",
]
