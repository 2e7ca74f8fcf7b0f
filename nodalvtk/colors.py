# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Wrap text in escape characters to produce colored output on terminals"""

from typing import Optional
from enum import Enum
from contextlib import contextmanager
import colorama
colorama.init()


class _AnsiiColorBackend:
    def __init__(self, use_colors=True, use_styles=True):
        self._reset_key = "reset_all"
        self._color_map = self._make_map(colorama.Fore, use_colors)
        self._style_map = self._make_map(colorama.Style, use_styles)
        assert self._reset_key in self._style_map

    def make_colored(self, text: str, color, style) -> str:
        if color is not None:
            text = self._color_map[str(color).lower()] + text
        if style is not None:
            text = self._style_map[str(style).lower()] + text
        if color is not None or style is not None:
            text = text + self._style_map[self._reset_key]
        return text

    def _make_map(self, codes, enabled: bool) -> dict:
        return {
            name.lower(): (getattr(codes, name) if enabled else "")
            for name in dir(codes) if not name.startswith('_')
        }


_COLOR_BACKEND = _AnsiiColorBackend()


@contextmanager
def text_color_options(use_colors=True, use_styles=True):
    """Temporarily enable/disable colors and styles in all colored text"""
    global _COLOR_BACKEND
    backend = _COLOR_BACKEND
    _COLOR_BACKEND = _AnsiiColorBackend(use_colors, use_styles)

    try:
        yield {"use_colors": use_colors, "use_styles": use_styles}
    finally:
        _COLOR_BACKEND = backend


class TextColor(Enum):
    red = "red"
    green = "green"
    yellow = "yellow"

    def __str__(self) -> str:
        return str(self.value)


class TextStyle(Enum):
    dim = "DIM"
    normal = "NORMAL"
    bright = "BRIGHT"

    def __str__(self) -> str:
        return str(self.value)


def make_colored(text: str,
                 color: Optional[TextColor] = None,
                 style: Optional[TextStyle] = None) -> str:
    return _COLOR_BACKEND.make_colored(text, color, style)


def make_status(succeeded: bool) -> str:
    """Return the colored outcome of an export"""
    if succeeded:
        return make_colored("succeeded", color=TextColor.green)
    return make_colored("failed", color=TextColor.red, style=TextStyle.bright)


def make_highlighted(text: str) -> str:
    return make_colored(text, style=TextStyle.bright)
