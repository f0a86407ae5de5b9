"""Top-level application states."""

from __future__ import annotations

from enum import Enum


class AppState(Enum):
    """Which screen the game is showing. The first member is the default."""

    MENU = "menu"
    IN_GAME = "in_game"