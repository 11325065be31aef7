"""Mode and modifier registry with host collision checks.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from loguru import logger as _loguru

from chainlog.emitter import Emitter, Event
from chainlog.exceptions import NameCollisionError
from chainlog.stats import Descriptor, DescriptorType, identity

__all__ = ['Registry', 'NOT', 'host_id']

# negation pseudo-mode; ``not`` is a keyword so attribute access uses ``not_``
NOT = ('not', 'not_')


def host_id(host: Any) -> str:
    """Name used for the host object in error messages.
    """
    return getattr(host, '_name', None) or type(host).__name__.lower()


class Registry:
    """Two name -> descriptor mappings, one for modes, one for modifiers.

    A name must not be an own attribute of the host, a reserved logger
    attribute, or already present in the other mapping. Re-adding a name
    to the same mapping replaces the descriptor.
    """

    def __init__(self, host: Any = None, emitter: Emitter | None = None,
                 reserved: Iterable[str] = ()) -> None:
        self.host = host
        self.emitter = emitter or Emitter()
        self.reserved = set(reserved) | set(NOT)
        self.modes: dict[str, Descriptor] = {}
        self.modifiers: dict[str, Descriptor] = {}
        # attributes the plugin itself put on the host
        self.mirrored: set[str] = set()

    def __contains__(self, name: str) -> bool:
        return name in self.modes or name in self.modifiers

    def get(self, name: str) -> Descriptor | None:
        return self.modes.get(name) or self.modifiers.get(name)

    def check(self, name: str, kind: DescriptorType) -> None:
        """Raise NameCollisionError if ``name`` cannot be registered.
        """
        # private names never reach the chain resolver
        if (name.startswith('_') or name in self.reserved
                or name in getattr(self.emitter, '__dict__', {})):
            raise NameCollisionError('logger', name, kind='Logger')
        host_attrs = getattr(self.host, '__dict__', {})
        if name in host_attrs and name not in self.mirrored:
            raise NameCollisionError(host_id(self.host), name)
        other = self.modifiers if kind == DescriptorType.MODE else self.modes
        if name in other:
            raise NameCollisionError('logger', name, kind='Logger')

    def add_mode(self, name: str, fn: Callable[[Any], Any] | None = None,
                 check: bool = True) -> Descriptor:
        """Register a mode and publish ``addMode``."""
        if check:
            self.check(name, DescriptorType.MODE)
        mode = Descriptor(name, fn or identity, DescriptorType.MODE)
        self.modes[name] = mode
        _loguru.debug('Added mode {}', name)
        self.emitter.emit(Event.ADD_MODE, name, mode)
        return mode

    def add_logger(self, name: str, fn: Callable[[Any], Any] | None = None,
                   check: bool = True, type: DescriptorType = DescriptorType.MODIFIER) -> Descriptor:
        """Register a modifier and publish ``addLogger``."""
        if check:
            self.check(name, DescriptorType.MODIFIER)
        modifier = Descriptor(name, fn or identity, type)
        self.modifiers[name] = modifier
        _loguru.debug('Added {} {}', type.value, name)
        self.emitter.emit(Event.ADD_LOGGER, name, modifier)
        return modifier
