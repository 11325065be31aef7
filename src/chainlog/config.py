import os

from libb import Setting, is_tty

Setting.unlock()

# Environment
CHECKTTY = is_tty()


def _flag(name: str, default: bool | None = None) -> bool | None:
    value = os.getenv(name, '').strip().lower()
    if not value:
        return default
    return value in {'1', 'true', 'yes'}


# Logger option defaults, overridden by plugin options
logger = Setting()
logger.verbose = _flag('CONFIG_CHAINLOG_VERBOSE')
# no colors when output is not a terminal
logger.strip_color = bool(_flag('CONFIG_CHAINLOG_STRIP_COLOR', not CHECKTTY))
logger.default_listener = bool(_flag('CONFIG_CHAINLOG_DEFAULT_LISTENER', True))

Setting.lock()
