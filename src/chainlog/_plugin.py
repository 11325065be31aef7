"""Plugin entry point: attach a Logger to a host application.

    app.use(plugin())
    app.logger.info('started')
    app.logger.verbose.warn('details')
    app.info('also works')
"""
from __future__ import annotations

import datetime
import sys
from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger as _loguru

from chainlog import colors
from chainlog._logger import Logger
from chainlog.listeners import default_listener

__all__ = ['plugin', 'DEFAULT_LOGGERS', 'DEFAULT_MODES']

DEFAULT_MODES = ('verbose',)

DEFAULT_LOGGERS = (
    'log',
    'subhead',
    'time',
    'timestamp',
    'inform',
    'info',
    'warn',
    'error',
    'success',
)

# built-in loggers that are a single style
_LOGGER_STYLES = {
    'log': 'bold',
    'subhead': 'bold',
    'inform': 'gray',
    'info': 'cyan',
    'warn': 'yellow',
    'error': 'red',
    'success': 'green',
}


def _now() -> str:
    return datetime.datetime.now().strftime('%H:%M:%S')


def default_modifiers(logger: Logger) -> dict[str, Callable[[str], str]]:
    """Transforms of the built-in loggers, bound to ``logger``'s stylizer.
    """
    def stamp() -> str:
        return logger.stylize('bg_black', logger.stylize('white', _now()))

    def styled(style: str) -> Callable[[str], str]:
        def fn(msg: str) -> str:
            return logger.stylize(style, msg)
        return fn

    modifiers = {name: styled(style) for name, style in _LOGGER_STYLES.items()}
    # time prints the stamp alone
    modifiers['time'] = lambda msg: stamp() + ' '
    modifiers['timestamp'] = lambda msg: stamp() + ' ' + logger.stylize('gray', msg)
    return {name: modifiers[name] for name in DEFAULT_LOGGERS}


def _mirror(logger: Logger, name: str) -> Callable[..., Logger]:
    """Host-level shortcut that resolves ``logger.<name>`` on every call."""
    def method(*args: Any) -> Logger:
        return getattr(logger, name)(*args)
    method.__name__ = method.__qualname__ = name
    method.__doc__ = f'Log through app.logger.{name}.'
    return method


def _fix_windows_console() -> None:
    """Enable ANSI escape handling on Windows consoles."""
    if sys.platform != 'win32':
        return
    try:
        import colorama
        colorama.just_fix_windows_console()
    except ImportError:
        _loguru.debug('colorama not installed, ANSI output left as is')


def _install(app: Any, options: dict[str, Any]) -> None:
    host_options = getattr(app, 'options', None)
    if isinstance(host_options, Mapping) and host_options.get('logger') is False:
        _loguru.debug('Logger disabled by host options')
        return
    if isinstance(getattr(app, 'logger', None), Logger):
        _loguru.debug('Logger already attached')
        return

    _fix_windows_console()
    logger = Logger(app, options)
    registry = logger._registry

    for style in colors.STYLES:
        logger.add_style(style, check=False)
    for name in DEFAULT_MODES:
        registry.add_mode(name, check=False)
    for name, fn in default_modifiers(logger).items():
        registry.add_logger(name, fn, check=False)

    if logger.options.get('default_listener', True):
        logger.on('log', default_listener(logger))
    else:
        _loguru.debug('Default listener disabled')

    app.logger = logger
    host_attrs = vars(app)
    for name in DEFAULT_LOGGERS:
        if name in host_attrs:
            _loguru.debug('Host already defines {}, not mirrored', name)
            continue
        setattr(app, name, _mirror(logger, name))
        registry.mirrored.add(name)


def plugin(options: dict[str, Any] | None = None, **kwargs: Any) -> Callable[[Any], None]:
    """Return a plugin that installs ``app.logger`` on a host.

    Options: ``verbose``, ``strip_color``, ``default_listener``, ``stream``.
    """
    merged = {**(options or {}), **kwargs}

    def install(app: Any) -> None:
        _install(app, merged)
    return install
