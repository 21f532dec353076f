from __future__ import annotations

"""Scoreboard panel: names, serve marker, set boxes, game score and hints."""

from dataclasses import dataclass
from typing import Optional
import pygame

from projection import Scoreboard
from grandslam.state import Player

from . import constants as C


@dataclass
class HUDState:
    board: Optional[Scoreboard] = None
    hint: str = "S: server wins | R: receiver wins | Space: simulate | N: new match | Esc: quit"
    last_point: str = ""


class HUD:
    def __init__(self, surf: pygame.Surface):
        # This sets up fonts and a small state object for drawing
        self.surf = surf
        self.font = pygame.font.SysFont("arial", 22)
        self.font_small = pygame.font.SysFont("arial", 16)
        self.font_score = pygame.font.SysFont("arial", 24, bold=True)
        self.state = HUDState()

    def update(self, **kwargs):
        # This updates values that the HUD will present
        for k, v in kwargs.items():
            if hasattr(self.state, k):
                setattr(self.state, k, v)

    def _box(self, rect: pygame.Rect, text: str, color=C.SCORE_TEXT_COLOR, font=None):
        pygame.draw.rect(self.surf, C.BOX_BG_COLOR, rect)
        pygame.draw.rect(self.surf, C.PANEL_BORDER_COLOR, rect, 1)
        if text:
            img = (font or self.font_score).render(text, True, color)
            self.surf.blit(img, img.get_rect(center=rect.center))

    def draw(self):
        board = self.state.board
        if board is None or board.match_over:
            self._draw_hint()
            return

        pad = 10
        row_h = 36
        name_w = 220
        box_w = 40
        game_w = 150
        x0, y0 = 16, 16
        panel_w = pad * 2 + 20 + name_w + C.MAX_SET_BOXES * (box_w + 4) + game_w
        panel = pygame.Rect(x0, y0, panel_w, pad * 2 + row_h * 2 + 28)
        bg = pygame.Surface(panel.size, pygame.SRCALPHA)
        bg.fill((*C.PANEL_BG_COLOR, 220))
        self.surf.blit(bg, panel.topleft)
        pygame.draw.rect(self.surf, C.PANEL_BORDER_COLOR, panel, 2)

        game_x = x0 + pad + 20 + name_w + C.MAX_SET_BOXES * (box_w + 4)
        for row, (player, name) in enumerate(((Player.PLAYER1, board.name1), (Player.PLAYER2, board.name2))):
            y = y0 + pad + row * row_h
            if board.serving is player:
                pygame.draw.circle(self.surf, C.SERVE_DOT_COLOR, (x0 + pad + 8, y + row_h // 2), 6)
            img = self.font.render(name, True, C.HUD_TEXT_COLOR)
            self.surf.blit(img, (x0 + pad + 20, y + (row_h - img.get_height()) // 2))
            for i in range(C.MAX_SET_BOXES):
                rect = pygame.Rect(x0 + pad + 20 + name_w + i * (box_w + 4), y + 2, box_w, row_h - 4)
                text = str(board.sets[i][row]) if i < len(board.sets) else ""
                self._box(rect, text)
            if board.game_boxes is not None:
                self._box(pygame.Rect(game_x, y + 2, game_w, row_h - 4), board.game_boxes[row])

        if board.banner is not None:
            # One wide box over both rows for deuce and advantage
            rect = pygame.Rect(game_x, y0 + pad + 2, game_w, row_h * 2 - 4)
            self._box(rect, "")
            lines = board.banner.split("\n")
            total_h = sum(self.font_small.get_height() for _ in lines)
            ly = rect.centery - total_h // 2
            for line in lines:
                img = self.font_small.render(line, True, C.SCORE_TEXT_COLOR)
                self.surf.blit(img, (rect.centerx - img.get_width() // 2, ly))
                ly += img.get_height()

        if board.tie_break:
            img = self.font_small.render("TIE BREAK", True, C.TIE_BREAK_COLOR)
            self.surf.blit(img, (game_x, y0 + pad + row_h * 2 + 4))

        status = self.font_small.render(board.description, True, C.HUD_TEXT_COLOR)
        self.surf.blit(status, (x0 + pad, y0 + pad + row_h * 2 + 4))
        self._draw_hint()

    def _draw_hint(self):
        lines = [self.state.last_point, self.state.hint]
        y = self.surf.get_height() - 10
        for text in reversed([t for t in lines if t]):
            img = self.font_small.render(text, True, C.HUD_TEXT_COLOR)
            y -= img.get_height() + 4
            bg = pygame.Surface((img.get_width() + 10, img.get_height() + 4), pygame.SRCALPHA)
            bg.fill((0, 0, 0, 120))
            self.surf.blit(bg, (5, y - 2))
            self.surf.blit(img, (10, y))
