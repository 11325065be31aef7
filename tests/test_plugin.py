"""Tests for chainlog._plugin module."""
import sys
from unittest.mock import MagicMock, patch

import pytest
from conftest import App

from chainlog import Logger, plugin
from chainlog._plugin import DEFAULT_LOGGERS, default_modifiers
from chainlog.stats import DescriptorType

TIME = '12:34:56'
STAMP = f'\x1b[40m\x1b[37m{TIME}\x1b[39m\x1b[49m'

#
# Attach tests
#


class TestAttach:

    def test_installs_logger(self):
        """Test use(plugin()) installs a callable logger."""
        app = App()
        app.use(plugin())
        assert isinstance(app.logger, Logger)
        assert callable(app.logger)
        assert app.logger.host is app

    def test_attaches_once(self):
        """Test using the plugin twice keeps the first logger."""
        app = App()
        app.use(plugin(verbose=False))
        first = app.logger
        app.use(plugin(verbose=True))
        assert app.logger is first
        assert first.options['verbose'] is False

    def test_skipped_when_host_disables_logger(self):
        """Test a false logger option on the host skips installation."""
        app = App(options={'logger': False})
        app.use(plugin())
        assert not hasattr(app, 'logger')
        assert not hasattr(app, 'info')

    def test_registers_defaults(self):
        """Test built-in modes, loggers and styles are registered."""
        app = App()
        app.use(plugin())
        assert list(app.logger.modes) == ['verbose']
        for name in DEFAULT_LOGGERS:
            assert app.logger.modifiers[name].type == DescriptorType.MODIFIER
        assert app.logger.modifiers['red'].type == DescriptorType.STYLE

    def test_options_passed_through(self):
        """Test plugin options reach the logger."""
        app = App()
        app.use(plugin({'verbose': True}, strip_color=True))
        assert app.logger.options['verbose'] is True
        assert app.logger.options['strip_color'] is True

    def test_mirrors_loggers_on_host(self):
        """Test each built-in logger is available on the host."""
        app = App()
        app.use(plugin())
        for name in DEFAULT_LOGGERS:
            assert callable(vars(app)[name])
        assert app.info.__name__ == 'info'

    def test_does_not_overwrite_host_method(self):
        """Test an existing host method is left alone."""
        app = App()
        app.error = lambda s: 'error: ' + s
        app.use(plugin())
        assert app.error('bar') == 'error: bar'
        assert 'error' in app.logger.modifiers

    def test_mirrored_names_can_be_re_added(self):
        """Test re-adding a built-in logger replaces its transform."""
        app = App()
        app.use(plugin())
        app.logger.add_logger('info', str.upper)
        assert app.logger.modifiers['info'].fn('x') == 'X'

    def test_default_listener_subscribed(self):
        """Test the default listener is wired by default."""
        app = App()
        app.use(plugin())
        assert app.logger.has_listeners('log')

    def test_default_listener_disabled(self, capsys):
        """Test no output without the default listener, events still fire."""
        app = App()
        app.use(plugin({'default_listener': False}))
        records = []
        app.logger.on('log', records.append)
        app.logger.error('nothing')
        assert capsys.readouterr().out == ''
        assert [s.name for s in records] == ['error']


#
# Output tests
#


class TestOutput:

    def setup_method(self):
        self.app = App()
        self.app.use(plugin(strip_color=False))
        self.logger = self.app.logger

    def test_info(self, capsys):
        """Test a single info line."""
        self.logger.info('info message')
        assert capsys.readouterr().out == '\x1b[36minfo message\x1b[39m\n'

    def test_modes_verbose_unset(self, capsys):
        """Test neither verbose polarity passes while verbose is unset."""
        self.logger.options['verbose'] = None
        self.logger.info('info message').verbose.error('error message').not_.verbose.warn('warn message')
        assert capsys.readouterr().out == '\x1b[36minfo message\x1b[39m\n'

    def test_modes_verbose_true(self, capsys):
        """Test verbose lines pass and not verbose lines are dropped."""
        self.logger.options['verbose'] = True
        self.logger.info('info message').verbose.error('error message').not_.verbose.warn('warn message')
        assert capsys.readouterr().out == ('\x1b[36minfo message\x1b[39m\n'
                                           '\x1b[31merror message\x1b[39m\n')

    def test_modes_verbose_false(self, capsys):
        """Test not verbose lines pass and verbose lines are dropped."""
        self.logger.options['verbose'] = False
        self.logger.info('info message').verbose.error('error message').not_.verbose.warn('warn message')
        assert capsys.readouterr().out == ('\x1b[36minfo message\x1b[39m\n'
                                           '\x1b[33mwarn message\x1b[39m\n')

    @patch('chainlog._plugin._now', return_value=TIME)
    def test_default_styles(self, _, capsys):
        """Test the styles of every built-in logger."""
        self.logger.log('log message')
        self.logger.subhead('subhead message')
        self.logger.time('time message')
        self.logger.timestamp('timestamp message')
        self.logger.inform('inform message')
        self.logger.info('info message')
        self.logger.warn('warn message')
        self.logger.error('error message')
        self.logger.success('success message')
        assert capsys.readouterr().out == '\n'.join([
            '\x1b[1mlog message\x1b[22m',
            '\x1b[1msubhead message\x1b[22m',
            f'{STAMP} ',
            f'{STAMP} \x1b[90mtimestamp message\x1b[39m',
            '\x1b[90minform message\x1b[39m',
            '\x1b[36minfo message\x1b[39m',
            '\x1b[33mwarn message\x1b[39m',
            '\x1b[31merror message\x1b[39m',
            '\x1b[32msuccess message\x1b[39m',
            '',
        ])

    def test_call_logger_directly(self, capsys):
        """Test app.logger(...) logs with the log style."""
        self.logger('message')
        assert capsys.readouterr().out == '\x1b[1mmessage\x1b[22m\n'

    def test_host_shortcut(self, capsys):
        """Test app.info(...) logs through the logger."""
        self.app.info('info message')
        assert capsys.readouterr().out == '\x1b[36minfo message\x1b[39m\n'

    def test_host_shortcut_returns_logger(self, capsys):
        """Test host shortcuts return the logger for chaining."""
        assert self.app.warn('w') is self.logger

    def test_style_chain(self, capsys):
        """Test styles and the terminal logger apply in chain order."""
        self.logger.red.log('foo')
        assert capsys.readouterr().out == '\x1b[1m\x1b[31mfoo\x1b[39m\x1b[22m\n'

    def test_format_arguments(self, capsys):
        """Test call arguments are formatted before styling."""
        self.logger.info('%s=%d', 'count', 3)
        assert capsys.readouterr().out == '\x1b[36mcount=3\x1b[39m\n'

    def test_mode_function_applied(self, capsys):
        """Test custom mode functions transform the message."""
        self.logger.add_mode('tag', lambda msg: '[TAG] ' + msg)
        self.logger.tag.inform('x')
        assert capsys.readouterr().out == '\x1b[90m[TAG] x\x1b[39m\n'

    def test_negated_custom_mode_suppressed(self, capsys):
        """Test a negated mode without an option is dropped."""
        self.logger.add_mode('tag')
        self.logger.not_.tag.info('x')
        assert capsys.readouterr().out == ''

    def test_custom_mode_gated_by_option(self, capsys):
        """Test a custom mode named after an option is gated by it."""
        self.logger.add_mode('debug')
        self.logger.options['debug'] = False
        self.logger.debug.info('hidden').not_.debug.info('shown')
        assert capsys.readouterr().out == '\x1b[36mshown\x1b[39m\n'

    def test_strip_color_output(self, capsys):
        """Test strip_color writes plain text."""
        self.logger.options['strip_color'] = True
        self.logger.error('plain')
        assert capsys.readouterr().out == 'plain\n'

    def test_custom_logger_output(self, capsys):
        """Test a user defined logger writes its transform."""
        self.logger.add_logger('note', lambda msg: '[NOTE] ' + msg)
        self.logger.note('x')
        assert capsys.readouterr().out == '[NOTE] x\n'


#
# Windows console tests
#


class TestWindowsConsole:

    @patch('chainlog._plugin.sys.platform', 'win32')
    def test_colorama_fix_on_windows(self):
        """Test attaching on Windows enables ANSI handling via colorama."""
        mock_colorama = MagicMock()
        with patch.dict(sys.modules, {'colorama': mock_colorama}):
            App().use(plugin())
        mock_colorama.just_fix_windows_console.assert_called_once_with()

    @patch('chainlog._plugin.sys.platform', 'win32')
    def test_missing_colorama_on_windows(self):
        """Test attaching on Windows without colorama still installs the logger."""
        with patch.dict(sys.modules, {'colorama': None}):
            app = App()
            app.use(plugin())
        assert isinstance(app.logger, Logger)

    @patch('chainlog._plugin.sys.platform', 'linux')
    def test_no_colorama_elsewhere(self):
        """Test colorama is not touched outside Windows."""
        mock_colorama = MagicMock()
        with patch.dict(sys.modules, {'colorama': mock_colorama}):
            App().use(plugin())
        mock_colorama.just_fix_windows_console.assert_not_called()


class TestDefaultModifiers:

    def test_keys_in_order(self):
        """Test every built-in logger has a transform."""
        logger = Logger(strip_color=False)
        assert tuple(default_modifiers(logger)) == DEFAULT_LOGGERS

    @patch('chainlog._plugin._now', return_value=TIME)
    def test_time_drops_message(self, _):
        """Test time writes only the stamp."""
        logger = Logger(strip_color=False)
        assert default_modifiers(logger)['time']('ignored') == STAMP + ' '


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
