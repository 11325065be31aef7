"""ANSI style table.

Maps a style name to its opening and closing escape codes. The table is
what the logger consumes as its name -> transform mapping; every entry is
registered as a style modifier when the plugin attaches.
"""
from __future__ import annotations

import re

__all__ = ['STYLES', 'ANSI_PATTERN', 'has_style', 'style', 'strip_color']


def _code(n: int) -> str:
    return f'\x1b[{n}m'


STYLES: dict[str, tuple[str, str]] = {
    # modifiers
    'reset': (_code(0), _code(0)),
    'bold': (_code(1), _code(22)),
    'dim': (_code(2), _code(22)),
    'italic': (_code(3), _code(23)),
    'underline': (_code(4), _code(24)),
    'inverse': (_code(7), _code(27)),
    'hidden': (_code(8), _code(28)),
    'strikethrough': (_code(9), _code(29)),
    # colors
    'black': (_code(30), _code(39)),
    'red': (_code(31), _code(39)),
    'green': (_code(32), _code(39)),
    'yellow': (_code(33), _code(39)),
    'blue': (_code(34), _code(39)),
    'magenta': (_code(35), _code(39)),
    'cyan': (_code(36), _code(39)),
    'white': (_code(37), _code(39)),
    'gray': (_code(90), _code(39)),
    'grey': (_code(90), _code(39)),
    # background colors
    'bg_black': (_code(40), _code(49)),
    'bg_red': (_code(41), _code(49)),
    'bg_green': (_code(42), _code(49)),
    'bg_yellow': (_code(43), _code(49)),
    'bg_blue': (_code(44), _code(49)),
    'bg_magenta': (_code(45), _code(49)),
    'bg_cyan': (_code(46), _code(49)),
    'bg_white': (_code(47), _code(49)),
}

# bright variants sit 60 codes above the base colors
for _name in ('black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white'):
    _fg = int(STYLES[_name][0][2:-1])
    STYLES[f'{_name}_bright'] = (_code(_fg + 60), _code(39))
    STYLES[f'bg_{_name}_bright'] = (_code(_fg + 70), _code(49))
del _name, _fg

ANSI_PATTERN = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def has_style(name: str) -> bool:
    return name in STYLES


def style(name: str, text: str) -> str:
    """Wrap text in the named style, unchanged if the style is unknown.

    Closing codes already inside ``text`` are followed by the opening code
    again, so nested styles do not end the outer one early.

    >>> style('red', 'x')
    '\\x1b[31mx\\x1b[39m'
    >>> style('zebra', 'x')
    'x'
    """
    if name not in STYLES:
        return text
    start, end = STYLES[name]
    if end in text:
        text = text.replace(end, end + start)
    return f'{start}{text}{end}'


def strip_color(text: str) -> str:
    """Remove ANSI escape sequences.

    >>> strip_color('\\x1b[31mred\\x1b[39m')
    'red'
    """
    return ANSI_PATTERN.sub('', text)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
