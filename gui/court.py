from __future__ import annotations

"""Court geometry and drawing utilities.

The Court computes scaled rectangles/lines for a singles court using standard
dimensions and paints it in the surface colour of the tournament being
played. The logical court is in meters; drawing converts to pixels with a
consistent scale preserving aspect ratio.
"""

from dataclasses import dataclass
from typing import Tuple

import pygame

from . import constants as C


Vec2 = Tuple[float, float]


@dataclass
class CourtLayout:
    origin_px: Vec2  # top-left of court rect in window pixels
    scale: float  # pixels per meter
    size_px: Vec2  # width, height in pixels for court rect


class Court:
    def __init__(self, window_size: Tuple[int, int], surface: str = "hard"):
        # This sets up a court model based on the current window size
        self.window_size = window_size
        self.surface = surface
        self.layout: CourtLayout = self._compute_layout(window_size)

    def resize(self, window_size: Tuple[int, int]):
        # This recalculates the layout when the window changes
        self.window_size = window_size
        self.layout = self._compute_layout(window_size)

    def set_surface(self, surface: str):
        self.surface = surface if surface in C.SURFACE_COLORS else "hard"

    def _compute_layout(self, window_size: Tuple[int, int]) -> CourtLayout:
        # This computes the pixel scale and where to place the court rectangle
        w, h = window_size
        pad = C.WINDOW_PADDING_PX
        avail_w = max(100, w - 2 * pad)
        avail_h = max(100, h - 2 * pad)

        # Horizontal orientation maps court length to screen width, and
        # court width to screen height.
        scale = min(avail_w / C.COURT_LENGTH_M, avail_h / C.COURT_WIDTH_M)

        size_px = (C.COURT_LENGTH_M * scale, C.COURT_WIDTH_M * scale)
        origin_px = ((w - size_px[0]) / 2.0, (h - size_px[1]) / 2.0)
        return CourtLayout(origin_px=origin_px, scale=scale, size_px=size_px)

    def to_px(self, x_m: float, y_m: float) -> Vec2:
        # Court length (y_m) runs along screen X, court width (x_m) along screen Y
        ox, oy = self.layout.origin_px
        s = self.layout.scale
        return (ox + y_m * s, oy + x_m * s)

    def draw(self, surf: pygame.Surface):
        surf.fill(C.SURROUND_COLORS[self.surface])
        ox, oy = self.layout.origin_px
        w_px, h_px = self.layout.size_px
        pygame.draw.rect(surf, C.SURFACE_COLORS[self.surface], pygame.Rect(ox, oy, w_px, h_px))

        def line_m(p1: Vec2, p2: Vec2, width: int = 2):
            pygame.draw.line(surf, C.LINE_COLOR, self.to_px(*p1), self.to_px(*p2), width)

        # Baselines and sidelines
        line_m((0.0, 0.0), (C.COURT_WIDTH_M, 0.0), 3)
        line_m((0.0, C.COURT_LENGTH_M), (C.COURT_WIDTH_M, C.COURT_LENGTH_M), 3)
        line_m((0.0, 0.0), (0.0, C.COURT_LENGTH_M), 3)
        line_m((C.COURT_WIDTH_M, 0.0), (C.COURT_WIDTH_M, C.COURT_LENGTH_M), 3)

        pygame.draw.line(
            surf,
            C.NET_COLOR,
            self.to_px(0.0, C.NET_Y_FROM_TOP_M),
            self.to_px(C.COURT_WIDTH_M, C.NET_Y_FROM_TOP_M),
            3,
        )

        # Service lines and the center service line between them
        sy_top = C.NET_Y_FROM_TOP_M - C.SERVICE_LINE_FROM_NET_M
        sy_bot = C.NET_Y_FROM_TOP_M + C.SERVICE_LINE_FROM_NET_M
        cx = C.COURT_WIDTH_M / 2.0
        line_m((0.0, sy_top), (C.COURT_WIDTH_M, sy_top), 2)
        line_m((0.0, sy_bot), (C.COURT_WIDTH_M, sy_bot), 2)
        line_m((cx, sy_top), (cx, sy_bot), 2)

        cm = C.CENTER_MARK_M
        line_m((cx - cm / 2, 0.0), (cx + cm / 2, 0.0), 2)
        line_m((cx - cm / 2, C.COURT_LENGTH_M), (cx + cm / 2, C.COURT_LENGTH_M), 2)
