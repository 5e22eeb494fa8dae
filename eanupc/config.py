# -*- coding: utf-8 -*-
"""
RU: Настройки кодировщика (зазоры дополнений, высоты строк, предпросмотр).
EN: Encoder configuration: add-on gaps, row heights and preview settings.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Final, Mapping, Optional

from eanupc.model.enums import Symbology

# Gap ranges (modules) honoured for an explicit add-on gap override.
ADDON_GAP_RANGE: Final[tuple[int, int]] = (7, 12)
UPCA_ADDON_GAP_RANGE: Final[tuple[int, int]] = (9, 12)


@dataclass(frozen=True)
class EncoderConfig:
    """
    Encoder defaults.

    Attributes:
        default_addon_gap: Gap before an add-on for EAN, UPC-E and ISBN.
        default_upca_addon_gap: Gap before an add-on for UPC-A variants.
        linear_row_height: Height of the linear row (modules).
        separator_row_height: Height of each composite separator row.
        quiet_zone: Blank modules around the preview image.
        render_scale: Preview pixels per module.

    Examples:
        >>> cfg = EncoderConfig()
        >>> cfg.addon_gap_for(Symbology.UPCA)
        9

        >>> cfg = EncoderConfig.from_mapping({"default_addon_gap": 8})
        >>> cfg.addon_gap_for(Symbology.EANX)
        8
    """

    default_addon_gap: int = 7
    default_upca_addon_gap: int = 9
    linear_row_height: int = 50
    separator_row_height: int = 2
    quiet_zone: int = 10
    render_scale: int = 2

    def __post_init__(self) -> None:
        lo, hi = ADDON_GAP_RANGE
        if not lo <= self.default_addon_gap <= hi:
            raise ValueError(f"default_addon_gap must be between {lo} and {hi}")
        lo, hi = UPCA_ADDON_GAP_RANGE
        if not lo <= self.default_upca_addon_gap <= hi:
            raise ValueError(f"default_upca_addon_gap must be between {lo} and {hi}")
        if self.linear_row_height < 1:
            raise ValueError("linear_row_height must be >= 1")
        if self.separator_row_height < 1:
            raise ValueError("separator_row_height must be >= 1")
        if self.quiet_zone < 0:
            raise ValueError("quiet_zone must be >= 0")
        if self.render_scale < 1:
            raise ValueError("render_scale must be >= 1")

    def addon_gap_for(self, symbology: Symbology) -> int:
        if symbology.is_upca_class:
            return self.default_upca_addon_gap
        return self.default_addon_gap

    @staticmethod
    def gap_range_for(symbology: Symbology) -> tuple[int, int]:
        return UPCA_ADDON_GAP_RANGE if symbology.is_upca_class else ADDON_GAP_RANGE

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EncoderConfig":
        """Build from a mapping, ignoring keys that are not config fields."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "EncoderConfig":
        """Read ``eanupc.json`` (or ``config_path``) through ``load_config``."""
        from eanupc import load_config

        return cls.from_mapping(load_config(config_path))


DEFAULT_CONFIG: Final[EncoderConfig] = EncoderConfig()


__all__ = [
    "EncoderConfig",
    "DEFAULT_CONFIG",
    "ADDON_GAP_RANGE",
    "UPCA_ADDON_GAP_RANGE",
]
