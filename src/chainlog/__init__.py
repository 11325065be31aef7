"""Chainable, event-driven logger for host applications.

Public API - users should only import from this module.

Usage:
    import chainlog

    app.use(chainlog.plugin(verbose=False))

    # Chain modes and modifiers, then call
    app.logger.info('Application started')
    app.logger.verbose.red.log('only shown with verbose')
    app.logger.not_.verbose.warn('only shown without verbose')

    # Statements can be chained in one expression
    app.logger.info('a').verbose.error('b')

    # Register your own
    app.logger.add_mode('debug')
    app.logger.add_logger('note', lambda msg: '[NOTE] ' + msg)

    # Listen to every record
    app.logger.on('log', lambda stats: print(stats.get_modifiers('name')))

Diagnostics are emitted through loguru and disabled by default; enable
them with ``loguru.logger.enable('chainlog')``.
"""
from loguru import logger as _loguru

from chainlog._logger import Logger
from chainlog._plugin import DEFAULT_LOGGERS, DEFAULT_MODES, plugin
from chainlog.chain import Chain, ChainContext
from chainlog.colors import STYLES, strip_color, style
from chainlog.emitter import Emitter, Event
from chainlog.exceptions import ChainlogError, LoggerLookupError
from chainlog.exceptions import NameCollisionError
from chainlog.listeners import default_listener
from chainlog.stats import Descriptor, DescriptorType, Stats

_loguru.disable('chainlog')

__all__ = [
    # Entry point
    'plugin',
    'Logger',
    'DEFAULT_LOGGERS',
    'DEFAULT_MODES',
    # Chain
    'Chain',
    'ChainContext',
    'Stats',
    'Descriptor',
    'DescriptorType',
    # Events
    'Emitter',
    'Event',
    'default_listener',
    # Styles
    'STYLES',
    'style',
    'strip_color',
    # Errors
    'ChainlogError',
    'NameCollisionError',
    'LoggerLookupError',
]
