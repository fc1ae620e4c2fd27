"""
Tests for config, environment and logging support.
"""

import json
import logging
import types

from twigbridge.logging import JSONFormatter, LoggerConfig, getLogger
from twigbridge.support import Config, EnvHelper, Storage


# -------- Config --------


def test_config_runtime_override():
    Config.set('View.Paths', ['/srv/views'])

    assert Config.get('view.paths') == ['/srv/views']
    assert Config.has('VIEW.PATHS') is True


def test_config_missing_file_returns_default():
    assert Config.get('nosuchfile.KEY', 'fallback') == 'fallback'
    assert Config.has('nosuchfile.KEY') is False


def test_config_navigates_modules_and_dicts(monkeypatch):
    module = types.SimpleNamespace(TWIG={'File_Extensions': ['twig'], 'namespaces': {}})
    monkeypatch.setitem(Config._loaded, 'fake', module)

    assert Config.get('fake.twig.file_extensions') == ['twig']
    assert Config.get('fake.TWIG.missing', 'default') == 'default'
    assert Config.get('fake.twig.file_extensions.deeper', 'default') == 'default'


def test_config_reload_forgets_one_module(monkeypatch):
    monkeypatch.setitem(Config._loaded, 'fake', types.SimpleNamespace(KEY='old'))
    monkeypatch.setitem(Config._loaded, 'other', types.SimpleNamespace(KEY='kept'))

    Config.reload('FAKE')

    assert 'fake' not in Config._loaded
    assert Config.get('other.key') == 'kept'


# -------- Storage --------


def test_storage_paths_are_rooted_at_base(tmp_path):
    Storage.initialize(tmp_path)
    base = tmp_path.resolve()

    assert Storage.base('/.env') == base / '.env'
    assert Storage.views('emails') == base / 'resources' / 'views' / 'emails'
    assert Storage.logs('twigbridge.log') == base / 'storage' / 'logs' / 'twigbridge.log'
    assert Storage.exists(tmp_path) is True
    assert Storage.exists(tmp_path / 'nope') is False


def test_storage_ensure_directory(tmp_path):
    created = Storage.ensure_directory(tmp_path / 'storage' / 'logs')

    assert created.is_dir()


# -------- EnvHelper --------


def test_env_helper_reads_dotenv(tmp_path, monkeypatch):
    env_file = tmp_path / '.env'
    env_file.write_text('TWIGBRIDGE_TEST_DEBUG=true\nTWIGBRIDGE_TEST_PORT=8080\n')
    monkeypatch.setenv('TWIGBRIDGE_TEST_DEBUG', 'placeholder')
    monkeypatch.setenv('TWIGBRIDGE_TEST_PORT', 'placeholder')

    assert EnvHelper.load(env_file, override=True) is True
    assert EnvHelper.get_bool('TWIGBRIDGE_TEST_DEBUG') is True
    assert EnvHelper.get_int('TWIGBRIDGE_TEST_PORT') == 8080


def test_env_helper_missing_file(tmp_path):
    assert EnvHelper.load(tmp_path / '.env') is False
    assert EnvHelper.get('TWIGBRIDGE_TEST_UNSET', 'default') == 'default'
    assert EnvHelper.get_int('TWIGBRIDGE_TEST_UNSET', 3) == 3


# -------- logging --------


def test_get_logger_folds_bare_names_into_package_logger():
    assert getLogger('anything') is logging.getLogger('twigbridge')
    assert getLogger() is logging.getLogger('twigbridge')
    assert getLogger('twigbridge.view.finder').name == 'twigbridge.view.finder'


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        'twigbridge.view.finder', logging.DEBUG, __file__, 10,
        'View [%s] resolved', ('welcome',), None
    )
    record.view = 'welcome'

    data = json.loads(JSONFormatter().format(record))

    assert data['message'] == 'View [welcome] resolved'
    assert data['level'] == 'DEBUG'
    assert data['logger'] == 'twigbridge.view.finder'
    assert data['view'] == 'welcome'


def test_level_by_environment():
    assert LoggerConfig.get_level_by_environment('production') == logging.WARNING
    assert LoggerConfig.get_level_by_environment('Development') == logging.DEBUG
    assert LoggerConfig.get_level_by_environment('unknown') == logging.INFO
