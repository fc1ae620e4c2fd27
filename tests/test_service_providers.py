"""
Tests for the service providers.
"""

import logging
import logging.handlers

import pytest

from twigbridge.console.commands import LintCommand
from twigbridge.providers import LoggingServiceProvider, TwigServiceProvider
from twigbridge.support import Config, Storage, TwigTemplateEngine
from twigbridge.view import FileViewFinder, ViewFinderLoader


@pytest.fixture
def configured(tmp_path, write_view):
    write_view('views/welcome.twig', 'Hello {{ name }}')
    write_view('views/welcome.php', 'php wins without twig registered')
    write_view('admin/dashboard.twig', 'dashboard')

    Config.set('view.PATHS', [str(tmp_path / 'views')])
    Config.set('twigbridge.TWIG.namespaces', {'admin': str(tmp_path / 'admin')})
    Config.set('twigbridge.TWIG.file_extensions', ['twig'])
    Config.set('twigbridge.TWIG.globals', {'name': 'world'})


def boot(app):
    provider = TwigServiceProvider(app)
    provider.register()
    provider.boot()
    return provider


def test_register_binds_services(app, configured):
    provider = boot(app)

    assert isinstance(app.make('view.finder'), FileViewFinder)
    assert isinstance(app.make('twig'), TwigTemplateEngine)
    assert isinstance(app.make('twig.loader.viewfinder'), ViewFinderLoader)
    assert isinstance(app.make('command.twig.lint'), LintCommand)
    assert set(provider.provides()) == set(app.bindings)


def test_engine_shares_the_finder(app, configured):
    boot(app)

    assert app.make('twig').finder is app.make('view.finder')


def test_boot_registers_file_extensions_first(app, configured):
    boot(app)

    assert app.make('view.finder').get_extensions() == ['twig', 'blade.php', 'php', 'css']
    assert app.make('twig').render('welcome') == 'Hello world'


def test_boot_registers_namespaces(app, configured, tmp_path):
    boot(app)

    assert app.make('view.finder').get_hints() == {'admin': [str(tmp_path / 'admin')]}
    assert app.make('twig').render('admin::dashboard') == 'dashboard'


def test_view_paths_default_to_storage_views(app, tmp_path):
    Storage.initialize(tmp_path)

    boot(app)

    assert app.make('view.finder').get_paths() == [str(tmp_path.resolve() / 'resources' / 'views')]


def test_logging_provider_writes_under_storage_logs(app, tmp_path):
    Storage.initialize(tmp_path)
    Config.set('twigbridge.LOGGING', {'format': 'text', 'file_name': 'bridge'})

    LoggingServiceProvider(app).register()

    logger = logging.getLogger('twigbridge')
    try:
        file_handlers = [
            handler for handler in logger.handlers
            if isinstance(handler, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path.resolve() / 'storage' / 'logs' / 'bridge.log')
        assert logger.propagate is False
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


def test_logging_provider_can_be_disabled(app, tmp_path):
    Storage.initialize(tmp_path)
    Config.set('twigbridge.LOGGING', {'enabled': False})

    LoggingServiceProvider(app).register()

    assert not (tmp_path / 'storage' / 'logs').exists()
