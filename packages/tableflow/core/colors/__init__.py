"""Deterministic per-resource colors for calendar blocks."""

from tableflow.core.colors.assigner import (
    ResourceColorAssigner,
    ResourceRef,
    build_color_map,
    color_for,
    hash_resource_id,
    suggest_next_index,
)
from tableflow.core.colors.palette import TABLE_PALETTE, PaletteEntry

__all__ = [
    "TABLE_PALETTE",
    "PaletteEntry",
    "ResourceColorAssigner",
    "ResourceRef",
    "build_color_map",
    "color_for",
    "hash_resource_id",
    "suggest_next_index",
]
