"""
RU: Предпросмотр символа в памяти (Pillow). Файлы не создаются.
EN: In-memory Pillow preview of an encoded Symbol.
"""

from __future__ import annotations

import logging
from typing import Final, Optional

from PIL import Image, ImageDraw

from eanupc.config import DEFAULT_CONFIG, EncoderConfig
from eanupc.model.symbol import Symbol

logger = logging.getLogger(__name__)

__all__ = ["render_image", "MAX_IMAGE_WIDTH", "MAX_IMAGE_HEIGHT"]

MAX_IMAGE_WIDTH: Final[int] = 10000
MAX_IMAGE_HEIGHT: Final[int] = 10000


def render_image(
    symbol: Symbol,
    scale: Optional[int] = None,
    quiet_zone: Optional[int] = None,
    config: EncoderConfig = DEFAULT_CONFIG,
) -> Image.Image:
    """
    Draw ``symbol`` as black modules on white.

    Args:
        symbol: Encoded symbol.
        scale: Pixels per module (default ``config.render_scale``).
        quiet_zone: Blank modules on every side (default ``config.quiet_zone``).

    Returns:
        PIL Image in RGB mode.

    Raises:
        ValueError: Scale below 1, or the image would exceed 10000 px.
    """
    scale = config.render_scale if scale is None else scale
    quiet_zone = config.quiet_zone if quiet_zone is None else quiet_zone
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    heights = [h or config.linear_row_height for h in symbol.row_heights]
    width_px = (symbol.width + 2 * quiet_zone) * scale
    height_px = (sum(heights) + 2 * quiet_zone) * scale
    if width_px > MAX_IMAGE_WIDTH or height_px > MAX_IMAGE_HEIGHT:
        raise ValueError(f"Image too large: {width_px}x{height_px} px")

    img = Image.new("RGB", (width_px, height_px), "white")
    draw = ImageDraw.Draw(img)
    y = quiet_zone * scale
    for line, height in zip(symbol.rows, heights):
        row_px = height * scale
        for column, module in enumerate(line):
            if module == "1":
                x = (quiet_zone + column) * scale
                draw.rectangle([x, y, x + scale - 1, y + row_px - 1], fill="black")
        y += row_px

    logger.debug("Rendered %s at %dx%d px", symbol, width_px, height_px)
    return img
