from __future__ import annotations

"""Pygame App for the Grand Slam scorekeeper.

Run with: `python -m gui.app`.

Controls:
  - S: the server wins the point
  - R: the receiver wins the point
  - Space/Click: simulate one point
  - N: start a new match with the same setup
  - Q/Esc: quit
"""

import argparse
import random
import sys
from typing import List, Optional

try:
    import pygame
except ImportError:  # pragma: no cover - runtime dependency hint
    print("Pygame is required for GUI. Install via: pip install pygame", file=sys.stderr)
    raise

from grandslam.engine import apply_point
from grandslam.rules import MatchConfig, parse_format, parse_tournament, rules_for
from grandslam.simulate import DEFAULT_SERVE_BIAS, random_outcomes
from grandslam.state import Concluded, MatchState, Player, initial
from projection import Scoreboard, take_snapshot

from . import constants as C
from .court import Court
from .hud import HUD
from .sprites import TrophySprite, draw_victory


def parse_args(argv=None):
    """Parse command line flags for the GUI app."""
    p = argparse.ArgumentParser(description="Grand Slam scorekeeper (Pygame)")
    p.add_argument("--player-1", default=None)
    p.add_argument("--player-2", default=None)
    p.add_argument("--tournament", default=None, help="french-open, us-open or wimbledon")
    p.add_argument("--format", dest="match_format", default=None, help="Best of 3 or 5 sets")
    p.add_argument("--seed", type=int, default=None, help="Seed for simulated points and trophy choice")
    p.add_argument("--serve-bias", type=int, default=DEFAULT_SERVE_BIAS)
    p.add_argument("--no-prompt", action="store_true", help="Skip GUI prompt and use provided flags")
    p.add_argument("--width", type=int, default=C.DEFAULT_WINDOW[0])
    p.add_argument("--height", type=int, default=C.DEFAULT_WINDOW[1])
    p.add_argument("--fps", type=int, default=C.TARGET_FPS)
    return p.parse_args(argv)


def config_from_fields(tournament: str, sets: str) -> Optional[MatchConfig]:
    """Return a MatchConfig for the setup fields, or None if either is invalid."""
    try:
        return MatchConfig(match_format=parse_format(sets), tournament=parse_tournament(tournament))
    except ValueError:
        return None


def run(argv=None) -> int:
    """Run the pygame scoreboard.

    This sets up the window, court and HUD, then loops until exit.
    """
    args = parse_args(argv)

    pygame.init()
    pygame.display.set_caption("Grand Slam Scorekeeper")
    flags = pygame.RESIZABLE | pygame.DOUBLEBUF
    screen = pygame.display.set_mode((args.width, args.height), flags)
    clock = pygame.time.Clock()

    court = Court(screen.get_size())
    hud = HUD(screen)

    cfg: Optional[MatchConfig] = None
    names: List[str] = [args.player_1 or "Player 1", args.player_2 or "Player 2"]

    def draw_prompt(fields, active_idx):
        """Draw a simple full screen prompt for match setup."""
        screen.fill((0, 0, 0))
        title_font = pygame.font.SysFont("arial", 28)
        font = pygame.font.SysFont("arial", 22)
        y = 80
        title = title_font.render("Enter Match Setup", True, C.HUD_TEXT_COLOR)
        screen.blit(title, ((screen.get_width() - title.get_width()) // 2, y))
        y += 50
        labels = [
            ("Player 1:", fields[0]),
            ("Player 2:", fields[1]),
            ("Tournament (french-open, us-open, wimbledon):", fields[2]),
            ("Sets (3 or 5):", fields[3]),
        ]
        x = 80
        for i, (lab, val) in enumerate(labels):
            img = font.render(f"{lab} {val}", True, C.SCORE_TEXT_COLOR if i == active_idx else C.HUD_TEXT_COLOR)
            screen.blit(img, (x, y))
            y += img.get_height() + 18
        hint = pygame.font.SysFont("arial", 18).render("Enter to confirm field, Tab to next, Esc to quit", True, C.HUD_TEXT_COLOR)
        screen.blit(hint, (x, y + 8))
        pygame.display.flip()

    def run_prompt() -> bool:
        """Handle the interactive prompt for match configuration."""
        nonlocal cfg
        fields = [names[0], names[1], args.tournament or "wimbledon", str(args.match_format or 3)]
        active = 0
        while True:
            draw_prompt(fields, active)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_TAB:
                    active = (active + 1) % 4
                elif event.key == pygame.K_RETURN:
                    if active < 3:
                        active += 1
                        continue
                    chosen = config_from_fields(fields[2], fields[3])
                    if chosen is None:
                        continue
                    cfg = chosen
                    # Names are free text; blank falls back to the slot label
                    names[0] = fields[0].strip() or "Player 1"
                    names[1] = fields[1].strip() or "Player 2"
                    return True
                elif event.key == pygame.K_BACKSPACE:
                    fields[active] = fields[active][:-1]
                elif event.unicode and event.unicode.isprintable():
                    fields[active] += event.unicode
            pygame.time.delay(10)

    if not args.no_prompt:
        if not run_prompt():
            pygame.quit()
            return 0
    else:
        cfg = config_from_fields(args.tournament or "wimbledon", str(args.match_format or 3))
        if cfg is None:
            print("Invalid tournament or format.", file=sys.stderr)
            pygame.quit()
            return 2

    court.set_surface(rules_for(cfg.tournament).court)
    # Cosmetic only: trophy artwork never affects the score
    trophy_rng = random.Random(args.seed)
    simulated = random_outcomes(args.seed, args.serve_bias)

    state: MatchState = initial(cfg)
    board: Scoreboard = take_snapshot(state, cfg, names[0], names[1])
    trophy: Optional[TrophySprite] = None
    hud.update(board=board)

    def play(server_won: bool):
        """Apply one point and refresh the snapshot."""
        nonlocal state, board, trophy
        if isinstance(state, Concluded):
            return
        scorer = state.server if server_won else state.server.other
        state = apply_point(state, server_won)
        board = take_snapshot(state, cfg, names[0], names[1], trophy_rng)
        winner = names[0] if scorer is Player.PLAYER1 else names[1]
        hud.update(board=board, last_point=f"Point {winner}")
        if board.match_over:
            w, h = screen.get_size()
            trophy = TrophySprite(board.trophy_index or 0, (w / 2, h / 2 - 60))

    def new_match():
        nonlocal state, board, trophy
        state = initial(cfg)
        board = take_snapshot(state, cfg, names[0], names[1])
        trophy = None
        hud.update(board=board, last_point="")

    running = True
    while running:
        clock.tick(args.fps)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), flags)
                court.resize(screen.get_size())
                hud.surf = screen
                if trophy is not None:
                    trophy.center_px = (event.w / 2, event.h / 2 - 60)
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key == pygame.K_s:
                    play(True)
                elif event.key == pygame.K_r:
                    play(False)
                elif event.key == pygame.K_SPACE:
                    play(next(simulated))
                elif event.key == pygame.K_n:
                    new_match()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                play(next(simulated))

        court.draw(screen)
        hud.draw()
        if trophy is not None and board.winner_name is not None:
            final = " ".join(f"[{a}-{b}]" for a, b in board.sets)
            draw_victory(screen, trophy, board.winner_name, final)
        pygame.display.flip()
    pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(run())
