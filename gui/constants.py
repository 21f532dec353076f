from __future__ import annotations

"""Constants for GUI rendering.

Court distances are in meters (court logical space). Rendering code scales
these to pixels at runtime to preserve aspect ratio regardless of the window
size.
"""

# Court standard dimensions (ITF singles)
COURT_LENGTH_M = 23.77
COURT_WIDTH_M = 8.23
NET_Y_FROM_TOP_M = COURT_LENGTH_M / 2.0
SERVICE_LINE_FROM_NET_M = 6.40  # distance from net toward baseline
CENTER_MARK_M = 0.10

# Court surface colors (R,G,B), keyed by RuleSet.court
SURFACE_COLORS = {
    "clay": (184, 92, 56),
    "hard": (48, 92, 150),
    "grass": (36, 110, 60),
}
SURROUND_COLORS = {
    "clay": (150, 72, 44),
    "hard": (40, 120, 80),
    "grass": (28, 84, 46),
}
LINE_COLOR = (240, 240, 240)
NET_COLOR = (30, 30, 30)

# Scoreboard panel
PANEL_BG_COLOR = (18, 40, 28)
PANEL_BORDER_COLOR = (210, 190, 120)
BOX_BG_COLOR = (8, 20, 14)
HUD_TEXT_COLOR = (245, 245, 245)
SCORE_TEXT_COLOR = (255, 221, 0)
SERVE_DOT_COLOR = (242, 214, 0)
TIE_BREAK_COLOR = (236, 88, 64)
MAX_SET_BOXES = 5

# Trophy artwork palettes (cup, base), one per trophy index
TROPHY_PALETTES = [
    ((212, 175, 55), (90, 60, 30)),   # gold cup on walnut
    ((192, 192, 200), (40, 40, 48)),  # silver cup on slate
    ((205, 127, 50), (20, 60, 40)),   # bronze plate on green
]

# Rendering
DEFAULT_WINDOW = (1024, 640)
TARGET_FPS = 30

# Padding around the court (in pixels) to keep some margin in window
WINDOW_PADDING_PX = 120
