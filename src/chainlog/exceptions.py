"""Errors raised by the logger engine."""
from __future__ import annotations

__all__ = ['ChainlogError', 'NameCollisionError', 'LoggerLookupError']


class ChainlogError(Exception):
    """Base class for all chainlog errors.
    """


class NameCollisionError(ChainlogError, ValueError):
    """A mode or modifier name is already taken on the host or the logger.
    """

    def __init__(self, owner: str, name: str, kind: str = 'App') -> None:
        self.owner = owner
        self.name = name
        super().__init__(f'{kind} "{owner}" already has a method "{name}". '
                         f'Unable to add logger method "{name}".')


class LoggerLookupError(ChainlogError, LookupError):
    """No modifier is registered under the requested name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Unable to find logger "{name}"')
