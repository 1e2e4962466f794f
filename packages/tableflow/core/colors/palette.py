"""Fixed table color palette.

Twelve distinct hues, each with a main color, a light background variant
and a darker border variant. The order is part of the contract: persisted
color indices point into this tuple.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaletteEntry(BaseModel):
    """One palette color with its light and border variants."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(description="Human-readable color name")
    main: str = Field(description="Main color (#RRGGBB)")
    light: str = Field(description="Light background variant (#RRGGBB)")
    border: str = Field(description="Darker border variant (#RRGGBB)")

    @field_validator("main", "light", "border")
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        """Validate colors are #RRGGBB."""
        if not v.startswith("#") or len(v) != 7:
            raise ValueError(f"Color must be #RRGGBB format, got '{v}'")
        return v


TABLE_PALETTE: tuple[PaletteEntry, ...] = (
    PaletteEntry(name="blue", main="#3B82F6", light="#DBEAFE", border="#2563EB"),
    PaletteEntry(name="emerald", main="#10B981", light="#D1FAE5", border="#059669"),
    PaletteEntry(name="amber", main="#F59E0B", light="#FEF3C7", border="#D97706"),
    PaletteEntry(name="rose", main="#F43F5E", light="#FFE4E6", border="#E11D48"),
    PaletteEntry(name="purple", main="#8B5CF6", light="#EDE9FE", border="#7C3AED"),
    PaletteEntry(name="cyan", main="#06B6D4", light="#CFFAFE", border="#0891B2"),
    PaletteEntry(name="orange", main="#F97316", light="#FFEDD5", border="#EA580C"),
    PaletteEntry(name="pink", main="#EC4899", light="#FCE7F3", border="#DB2777"),
    PaletteEntry(name="indigo", main="#6366F1", light="#E0E7FF", border="#4F46E5"),
    PaletteEntry(name="teal", main="#14B8A6", light="#CCFBF1", border="#0D9488"),
    PaletteEntry(name="red", main="#EF4444", light="#FEE2E2", border="#DC2626"),
    PaletteEntry(name="lime", main="#84CC16", light="#ECFCCB", border="#65A30D"),
)


__all__ = [
    "TABLE_PALETTE",
    "PaletteEntry",
]
