"""
Presenters: the views the engine draws into.
"""

from .base import Presenter
from .terminal_presenter import TerminalPresenter
from .web_presenter import WebPresenter, SCREEN_START, SCREEN_PLAYING, SCREEN_GAME_OVER

__all__ = [
    'Presenter',
    'TerminalPresenter',
    'WebPresenter',
    'SCREEN_START',
    'SCREEN_PLAYING',
    'SCREEN_GAME_OVER',
]
