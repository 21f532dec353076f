from __future__ import annotations

"""Trophy sprite shown once a match is over.

A lightweight class with explicit draw; no dependency on pygame.sprite
groups. The artwork index is picked at random by the projection layer and
only selects a palette here.
"""

from dataclasses import dataclass
from typing import Tuple
import pygame

from . import constants as C


Vec2 = Tuple[float, float]


@dataclass
class TrophySprite:
    trophy_index: int
    center_px: Vec2
    size_px: int = 160

    @property
    def palette(self):
        return C.TROPHY_PALETTES[self.trophy_index % len(C.TROPHY_PALETTES)]

    def draw(self, surf: pygame.Surface):
        # Draw a simple cup: bowl, two handles, stem and base
        cup, base = self.palette
        cx, cy = int(self.center_px[0]), int(self.center_px[1])
        s = self.size_px
        bowl = pygame.Rect(cx - s // 3, cy - s // 2, 2 * s // 3, s // 2)
        pygame.draw.ellipse(surf, cup, bowl)
        pygame.draw.rect(surf, cup, pygame.Rect(bowl.left, bowl.top, bowl.width, bowl.height // 2))
        handle_r = s // 8
        pygame.draw.circle(surf, cup, (bowl.left, bowl.top + bowl.height // 3), handle_r, 4)
        pygame.draw.circle(surf, cup, (bowl.right, bowl.top + bowl.height // 3), handle_r, 4)
        stem = pygame.Rect(cx - s // 20, bowl.bottom - 4, s // 10, s // 5)
        pygame.draw.rect(surf, cup, stem)
        foot = pygame.Rect(cx - s // 4, stem.bottom, s // 2, s // 8)
        pygame.draw.rect(surf, base, foot)
        pygame.draw.rect(surf, cup, foot, 2)


def draw_victory(surf: pygame.Surface, trophy: TrophySprite, winner_name: str, final_sets: str):
    """Draw the trophy with the winner name and final score beneath it."""
    overlay = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 150))
    surf.blit(overlay, (0, 0))
    trophy.draw(surf)
    y = int(trophy.center_px[1] + trophy.size_px // 2 + 16)
    name_font = pygame.font.SysFont("arial", 40, bold=True)
    small = pygame.font.SysFont("arial", 20)
    for img in (name_font.render(winner_name, True, C.SCORE_TEXT_COLOR), small.render(final_sets, True, C.HUD_TEXT_COLOR)):
        surf.blit(img, ((surf.get_width() - img.get_width()) // 2, y))
        y += img.get_height() + 8
