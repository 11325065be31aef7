"""Chain facade: turns attribute accesses into a stats record.

    logger.verbose.red.log('foo')

``verbose`` appends a mode, ``red`` and ``log`` append modifiers, and the
call seals the record, publishes it as a ``log`` event and hands back the
root logger so another statement can follow in the same expression.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from chainlog.registry import NOT
from chainlog.stats import Stats

if TYPE_CHECKING:
    from chainlog._logger import Logger

__all__ = ['ChainContext', 'Chain']


@dataclass
class ChainContext:
    """Mutable state of one chain expression."""
    stats: Stats = field(default_factory=Stats)
    negate: bool = False
    terminal: str | None = None

    def reset(self) -> None:
        self.stats = Stats()
        self.negate = False
        self.terminal = None


class Chain:
    """Callable facade returned by every chained access.

    Member resolution goes through a single ``__getattr__`` that looks the
    name up in the logger's registry; nothing is generated per name.
    """

    __slots__ = ('_logger', '_context')

    def __init__(self, logger: Logger, context: ChainContext | None = None) -> None:
        self._logger = logger
        self._context = context or ChainContext()

    def __getattr__(self, name: str) -> Any:
        if name.startswith('__'):
            raise AttributeError(name)
        return self._access(name)

    def _access(self, name: str) -> Any:
        logger = self._logger
        ctx = self._context
        override = logger._overrides.get(name)
        if override is not None:
            ctx.reset()
            return override
        if name in NOT:
            ctx.negate = True
            return self
        registry = logger._registry
        if name in registry.modes:
            ctx.stats.add_mode(registry.modes[name], negated=ctx.negate)
            ctx.negate = False
            ctx.terminal = None
            return self
        if name in registry.modifiers:
            ctx.stats.add_modifier(registry.modifiers[name])
            ctx.terminal = name
            return self
        raise AttributeError(f"'{type(logger).__name__}' chain has no mode or modifier '{name}'")

    def __call__(self, *args: Any) -> Logger:
        ctx = self._context
        stats = ctx.stats
        name = ctx.terminal
        if name is None:
            name = self._logger.default_modifier
            stats.add_modifier(self._logger._lookup(name))
        ctx.reset()
        return self._logger._dispatch(stats.seal(name, args))

    def __repr__(self) -> str:
        return f'<Chain {self._context.stats!r}>'
