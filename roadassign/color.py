"""RGB colors with alpha, and some predefined colors and schemes."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA color with components in the range 0-255."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} value out of range 0-255 -- '{value}'")

    @classmethod
    def from_rgba(cls, rgba: int, has_alpha: bool = False) -> Color:
        """Build a color from its hexadecimal representation 0xAARRGGBB."""
        return cls(
            (rgba >> 16) & 0xFF,
            (rgba >> 8) & 0xFF,
            rgba & 0xFF,
            (rgba >> 24) & 0xFF if has_alpha else 255,
        )

    @classmethod
    def from_floats(
        cls, red: float, green: float, blue: float, alpha: float = 1.0
    ) -> Color:
        """Build a color from components in the range 0.0-1.0."""
        components = (red, green, blue, alpha)
        for value in components:
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"color component out of range 0.0-1.0 -- '{value}'")
        return cls(*(math.floor(value * 255 + 0.5) for value in components))

    @property
    def normalized_red(self) -> float:
        """The red value in the range 0.0-1.0."""
        return self.red / 255.0

    @property
    def normalized_green(self) -> float:
        """The green value in the range 0.0-1.0."""
        return self.green / 255.0

    @property
    def normalized_blue(self) -> float:
        """The blue value in the range 0.0-1.0."""
        return self.blue / 255.0

    @property
    def normalized_alpha(self) -> float:
        """The alpha value in the range 0.0-1.0."""
        return self.alpha / 255.0


KIT_GREEN = Color(0, 150, 130)
KIT_GREEN_70 = Color(77, 182, 168)
KIT_GREEN_50 = Color(127, 202, 192)
KIT_GREEN_30 = Color(178, 223, 217)
KIT_GREEN_15 = Color(217, 239, 236)

KIT_BLUE = Color(70, 100, 170)
KIT_BLUE_70 = Color(126, 147, 196)
KIT_BLUE_50 = Color(162, 177, 212)
KIT_BLUE_30 = Color(199, 208, 229)
KIT_BLUE_15 = Color(227, 232, 242)

KIT_BLACK = Color(0, 0, 0)
KIT_BLACK_70 = Color(77, 77, 77)
KIT_BLACK_50 = Color(127, 127, 127)
KIT_BLACK_30 = Color(178, 178, 178)
KIT_BLACK_15 = Color(217, 217, 217)

KIT_PALEGREEN = Color(140, 182, 60)
KIT_PALEGREEN_70 = Color(174, 204, 118)
KIT_PALEGREEN_50 = Color(197, 218, 157)
KIT_PALEGREEN_30 = Color(220, 233, 196)
KIT_PALEGREEN_15 = Color(238, 244, 226)

KIT_YELLOW = Color(252, 229, 0)
KIT_YELLOW_70 = Color(253, 237, 77)
KIT_YELLOW_50 = Color(253, 242, 127)
KIT_YELLOW_30 = Color(254, 247, 178)
KIT_YELLOW_15 = Color(155, 251, 217)

KIT_ORANGE = Color(223, 155, 27)
KIT_ORANGE_70 = Color(233, 185, 95)
KIT_ORANGE_50 = Color(239, 205, 141)
KIT_ORANGE_30 = Color(245, 225, 186)
KIT_ORANGE_15 = Color(250, 240, 221)

KIT_BROWN = Color(167, 130, 46)
KIT_BROWN_70 = Color(193, 167, 108)
KIT_BROWN_50 = Color(211, 192, 150)
KIT_BROWN_30 = Color(228, 217, 192)
KIT_BROWN_15 = Color(242, 236, 224)

KIT_RED = Color(162, 34, 35)
KIT_RED_70 = Color(190, 100, 101)
KIT_RED_50 = Color(208, 144, 145)
KIT_RED_30 = Color(227, 188, 189)
KIT_RED_15 = Color(241, 222, 222)

KIT_LILAC = Color(163, 16, 124)
KIT_LILAC_70 = Color(190, 87, 163)
KIT_LILAC_50 = Color(209, 135, 189)
KIT_LILAC_30 = Color(227, 183, 215)
KIT_LILAC_15 = Color(241, 219, 235)

KIT_CYANBLUE = Color(35, 161, 224)
KIT_CYANBLUE_70 = Color(101, 189, 233)
KIT_CYANBLUE_50 = Color(145, 208, 239)
KIT_CYANBLUE_30 = Color(189, 227, 246)
KIT_CYANBLUE_15 = Color(222, 241, 250)

KIT_SCHEME = (
    KIT_GREEN, KIT_BLUE, KIT_BLACK, KIT_PALEGREEN, KIT_YELLOW,
    KIT_ORANGE, KIT_BROWN, KIT_RED, KIT_LILAC, KIT_CYANBLUE,
)

KIT_SCHEME_70 = (
    KIT_GREEN_70, KIT_BLUE_70, KIT_BLACK_70, KIT_PALEGREEN_70, KIT_YELLOW_70,
    KIT_ORANGE_70, KIT_BROWN_70, KIT_RED_70, KIT_LILAC_70, KIT_CYANBLUE_70,
)

KIT_SCHEME_50 = (
    KIT_GREEN_50, KIT_BLUE_50, KIT_BLACK_50, KIT_PALEGREEN_50, KIT_YELLOW_50,
    KIT_ORANGE_50, KIT_BROWN_50, KIT_RED_50, KIT_LILAC_50, KIT_CYANBLUE_50,
)

KIT_SCHEME_30 = (
    KIT_GREEN_30, KIT_BLUE_30, KIT_BLACK_30, KIT_PALEGREEN_30, KIT_YELLOW_30,
    KIT_ORANGE_30, KIT_BROWN_30, KIT_RED_30, KIT_LILAC_30, KIT_CYANBLUE_30,
)

KIT_SCHEME_15 = (
    KIT_GREEN_15, KIT_BLUE_15, KIT_BLACK_15, KIT_PALEGREEN_15, KIT_YELLOW_15,
    KIT_ORANGE_15, KIT_BROWN_15, KIT_RED_15, KIT_LILAC_15, KIT_CYANBLUE_15,
)

REDS_9CLASS = tuple(
    Color.from_rgba(rgb)
    for rgb in (
        0xFFF5F0, 0xFEE0D2, 0xFCBBA1,
        0xFC9272, 0xFB6A4A, 0xEF3B2C,
        0xCB181D, 0xA50F15, 0x67000D,
    )
)