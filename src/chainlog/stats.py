"""Descriptors and the per-chain stats record.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

__all__ = ['DescriptorType', 'Descriptor', 'Stats', 'identity']


def identity(value: Any) -> Any:
    return value


class DescriptorType(StrEnum):
    """Kinds of registered logger methods."""
    MODE = 'mode'
    MODIFIER = 'modifier'
    STYLE = 'style'


@dataclass(frozen=True)
class Descriptor:
    """A registered mode or modifier.

    ``fn`` transforms the rendered message. ``negated`` is only set on the
    copy of a mode stored in a stats record after a ``not`` access.
    """
    name: str
    fn: Callable[[Any], Any] = identity
    type: DescriptorType = DescriptorType.MODIFIER
    negated: bool = False

    @property
    def is_mode(self) -> bool:
        return self.type == DescriptorType.MODE

    def negate(self) -> Descriptor:
        return replace(self, negated=True)


class Stats:
    """Ordered record of the modes and modifiers traversed by one chain.

    Created by the first chained access, sealed by the terminal call and
    handed to ``log`` listeners. Nothing keeps a reference to it afterwards.
    """

    def __init__(self) -> None:
        self.name: str | None = None
        self.modes: list[Descriptor] = []
        self.modifiers: list[Descriptor] = []
        self.args: list[Any] = []

    def add_mode(self, mode: Descriptor, negated: bool = False) -> Stats:
        self.modes.append(mode.negate() if negated else mode)
        return self

    def add_modifier(self, modifier: Descriptor) -> Stats:
        self.modifiers.append(modifier)
        return self

    def seal(self, name: str, args: tuple | list) -> Stats:
        """Record the terminal modifier name and the call arguments."""
        self.name = name
        self.args = list(args)
        return self

    def get_modes(self, attr: str) -> list[Any]:
        """Return ``attr`` of every traversed mode, in chain order.

        >>> stats = Stats().add_mode(Descriptor('verbose', type=DescriptorType.MODE))
        >>> stats.get_modes('name')
        ['verbose']
        """
        return [getattr(mode, attr) for mode in self.modes]

    def get_modifiers(self, attr: str) -> list[Any]:
        """Return ``attr`` of every traversed modifier, in chain order."""
        return [getattr(modifier, attr) for modifier in self.modifiers]

    @property
    def styles(self) -> list[Descriptor]:
        return [m for m in self.modifiers if m.type == DescriptorType.STYLE]

    def is_negated(self, name: str) -> bool:
        return any(mode.negated for mode in self.modes if mode.name == name)

    def __repr__(self) -> str:
        return (f'Stats(name={self.name!r}, modes={self.get_modes("name")!r}, '
                f'modifiers={self.get_modifiers("name")!r}, args={self.args!r})')


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
