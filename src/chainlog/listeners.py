"""Default ``log`` listener: gate on modes, render, write.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from loguru import logger as _loguru

from chainlog.stats import Stats

if TYPE_CHECKING:
    from chainlog._logger import Logger

__all__ = ['passes', 'render', 'default_listener']


def passes(options: dict[str, Any], stats: Stats) -> bool:
    """Return True when every mode gate of the record is open.

    A mode named after an option is open when that option is truthy, or, for
    a negated mode, when it is set and falsy. An unset (None) option closes
    both polarities. Modes without an option are open unless negated.

    >>> from chainlog.stats import Descriptor, DescriptorType
    >>> verbose = Descriptor('verbose', type=DescriptorType.MODE)
    >>> passes({'verbose': False}, Stats().add_mode(verbose, negated=True))
    True
    >>> passes({'verbose': None}, Stats().add_mode(verbose))
    False
    """
    for mode in stats.modes:
        if mode.name in options:
            value = options[mode.name]
            if value is None:
                ok = False
            else:
                ok = not value if mode.negated else bool(value)
        else:
            ok = not mode.negated
        if not ok:
            return False
    return True


def render(logger: Logger, stats: Stats) -> str:
    """Format the call arguments and run mode then modifier transforms.
    """
    text = logger._format(*stats.args)
    for mode in stats.modes:
        text = mode.fn(text)
    for modifier in stats.modifiers:
        text = modifier.fn(text)
    return text


def default_listener(logger: Logger) -> Callable[[Stats], None]:
    """Build the listener that writes every record whose gates pass.
    """
    def listener(stats: Stats) -> None:
        if not passes(logger.options, stats):
            _loguru.trace('Suppressed {!r}', stats)
            return
        logger.writeln(render(logger, stats))
    return listener
