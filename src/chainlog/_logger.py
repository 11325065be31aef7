"""Logger facade - the object installed as ``app.logger``.

Users interact with this class: it owns the registry, the event bus, the
formatter, the stylizer and the write primitives. Registered modes and
modifiers are resolved through ``__getattr__`` and start a new chain.
"""
from __future__ import annotations

import json
import re
import sys
from collections.abc import Callable
from typing import Any, TextIO

from loguru import logger as _loguru

from chainlog import colors
from chainlog import config as config_log
from chainlog.chain import Chain
from chainlog.emitter import Emitter, Event
from chainlog.exceptions import LoggerLookupError
from chainlog.registry import NOT, Registry
from chainlog.stats import Descriptor, DescriptorType, Stats

__all__ = ['Logger', 'default_options']

_FORMAT_RE = re.compile(r'%[sdifjoO%]')


def default_options() -> dict[str, Any]:
    """Option defaults taken from the environment configuration."""
    return {
        'verbose': config_log.logger.verbose,
        'strip_color': config_log.logger.strip_color,
        'default_listener': config_log.logger.default_listener,
    }


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _convert(token: str, value: Any) -> str:
    """Render one printf-style marker, best effort."""
    try:
        if token in {'%d', '%i'}:
            if isinstance(value, int):
                return str(int(value))
            return str(int(float(value)))
        if token == '%f':
            return str(float(value))
    except OverflowError:
        return str(value)
    except (TypeError, ValueError):
        return 'NaN'
    if token == '%j':
        try:
            return json.dumps(value, default=str)
        except ValueError:
            return '[Circular]'
    if token in {'%o', '%O'}:
        return repr(value)
    return _to_str(value)


class Logger(Emitter):
    """Chainable logger attached to a host object.

    >>> logger = Logger()
    >>> logger.add_mode('verbose')  # doctest: +SKIP
    >>> logger.verbose.red.log('hello')  # doctest: +SKIP
    """

    default_modifier = 'log'

    def __init__(self, host: Any = None, options: dict[str, Any] | None = None,
                 **kwargs: Any) -> None:
        super().__init__()
        self.host = host
        self.options: dict[str, Any] = {**default_options(), **(options or {}), **kwargs}
        self._overrides: dict[str, Callable[..., Any]] = {}
        self._registry = Registry(host, emitter=self, reserved=_RESERVED)

    # Registration

    @property
    def modes(self) -> dict[str, Descriptor]:
        return self._registry.modes

    @property
    def modifiers(self) -> dict[str, Descriptor]:
        return self._registry.modifiers

    def add_mode(self, name: str, fn: Callable[[Any], Any] | None = None) -> Logger:
        """Register a mode gate, reachable afterwards as ``logger.<name>``."""
        self._registry.add_mode(name, fn)
        return self

    def add_logger(self, name: str, fn: Callable[[Any], Any] | None = None) -> Logger:
        """Register a modifier, reachable afterwards as ``logger.<name>``."""
        self._registry.add_logger(name, fn)
        return self

    add_emitter = add_logger

    def add_style(self, name: str, fn: Callable[[Any], Any] | None = None,
                  check: bool = True) -> Logger:
        """Register a style modifier; ``fn`` defaults to the style table entry."""
        if fn is None:
            def fn(text: str) -> str:
                return self.stylize(name, text)
        self._registry.add_logger(name, fn, check=check, type=DescriptorType.STYLE)
        return self

    def use(self, fn: Callable[[Logger], Any]) -> Logger:
        """Apply a logger plugin."""
        fn(self)
        return self

    # Chain entry

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)
        override = self._overrides.get(name)
        if override is not None:
            return override
        if name in NOT or name in self._registry:
            return Chain(self)._access(name)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        registry = self.__dict__.get('_registry')
        if registry is not None and name in registry:
            _loguru.debug('Overriding logger method {}', name)
            self._overrides[name] = value
            return
        super().__setattr__(name, value)

    def __call__(self, *args: Any) -> Logger:
        return self._emit(self.default_modifier, *args)

    # Emission

    def _lookup(self, name: str) -> Descriptor:
        modifier = self._registry.modifiers.get(name)
        if modifier is None:
            raise LoggerLookupError(name)
        return modifier

    def _dispatch(self, stats: Stats) -> Logger:
        _loguru.trace('Dispatching {!r}', stats)
        self.emit(Event.LOG, stats)
        return self

    def _emit(self, name: str, *args: Any) -> Logger:
        """Publish a ``log`` event for the registered modifier ``name``."""
        stats = Stats().add_modifier(self._lookup(name))
        return self._dispatch(stats.seal(name, args))

    # Formatting and output

    def _format(self, *args: Any) -> str:
        """Printf-style formatting of a log call's arguments.

        >>> Logger()._format('%s-%d', 'a', 1.5)
        'a-1'
        >>> Logger()._format([])
        ''
        """
        if len(args) == 1 and isinstance(args[0], list | tuple):
            args = tuple(args[0])
        if not args:
            return ''
        first, rest = args[0], list(args[1:])
        if not isinstance(first, str):
            return ' '.join(_to_str(arg) for arg in args)
        if not rest:
            return first

        def substitute(match: re.Match) -> str:
            token = match.group(0)
            if token == '%%':
                return '%'
            if not rest:
                return token
            return _convert(token, rest.pop(0))

        text = _FORMAT_RE.sub(substitute, first)
        return ' '.join([text, *(_to_str(arg) for arg in rest)])

    def stylize(self, style: str, text: str) -> str:
        """Apply a style from the style table, or strip colors entirely.
        """
        if self.options.get('strip_color'):
            return colors.strip_color(text)
        return colors.style(style, text)

    @property
    def stream(self) -> TextIO:
        # resolved per write so redirected stdout is honored
        return self.options.get('stream') or sys.stdout

    def write(self, *args: Any) -> Logger:
        """Format ``args`` and write the result without a newline."""
        text = self._format(*args)
        if text:
            self.stream.write(text)
        return self

    def writeln(self, *args: Any) -> Logger:
        """Format ``args`` and write the result plus one newline."""
        self.stream.write(self._format(*args) + '\n')
        return self

    def sep(self, glyph: str = ' · ') -> str:
        return self.stylize('gray', glyph)

    def __repr__(self) -> str:
        return f'<Logger modes={list(self.modes)} modifiers={len(self.modifiers)}>'


_RESERVED = {name for name in dir(Logger) if not name.startswith('_')} | {'host', 'options'}
