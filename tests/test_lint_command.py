"""
Tests for the twig:lint command.
"""

import json

import pytest

from twigbridge.console.commands import LintCommand
from twigbridge.support import TwigTemplateEngine
from twigbridge.view import FileViewFinder


@pytest.fixture
def engine(tmp_path):
    finder = FileViewFinder(paths=[tmp_path / 'views'], extensions=['twig'])
    return TwigTemplateEngine(finder, templates={'inline': '{{ ok }}'})


@pytest.fixture
def command(engine):
    return LintCommand(engine)


@pytest.fixture
def views(write_view):
    write_view('views/valid.twig', '{{ name }}')
    write_view('views/broken.twig', '{{ name }')


def test_signature_defaults_to_declared(command):
    assert command.name == 'twig:lint'
    assert command.signature.startswith('twig:lint')


@pytest.mark.asyncio
async def test_valid_named_template(command, views, capsys):
    assert await command.handle('valid') == 0

    output = capsys.readouterr().out
    assert 'OK in valid' in output
    assert 'All 1 Twig files contain valid syntax.' in output


@pytest.mark.asyncio
async def test_invalid_named_template(command, views, capsys):
    assert await command.handle('valid', 'broken') == 1

    output = capsys.readouterr().out
    assert 'KO in broken (line 1)' in output
    assert '1 Twig files have valid syntax and 1 contain errors.' in output


@pytest.mark.asyncio
async def test_unknown_template_raises(command):
    with pytest.raises(RuntimeError, match="'foo.txt' is not readable"):
        await command.handle('foo.txt')


@pytest.mark.asyncio
async def test_json_format(command, views, capsys):
    assert await command.handle('valid', 'broken', format='json') == 1

    details = json.loads(capsys.readouterr().out)
    assert [detail['file'] for detail in details] == ['valid', 'broken']
    assert details[0] == {'file': 'valid', 'valid': True, 'line': None, 'message': None}
    assert details[1]['valid'] is False
    assert details[1]['line'] == 1


@pytest.mark.asyncio
async def test_unknown_format(command):
    with pytest.raises(ValueError):
        await command.handle('valid', format='xml')


@pytest.mark.asyncio
async def test_lint_files(command, tmp_path, write_view):
    path = write_view('elsewhere/page.html', '{% if %}')

    assert await command.handle(files=[str(path)]) == 1


@pytest.mark.asyncio
async def test_unreadable_file(command, tmp_path):
    with pytest.raises(RuntimeError):
        await command.handle(files=[str(tmp_path / 'missing.twig')])


@pytest.mark.asyncio
async def test_lint_directories(command, tmp_path, views, write_view, capsys):
    write_view('views/notes.txt', '{{ not a template')

    assert await command.handle(directories=[str(tmp_path / 'views')], format='json') == 1

    files = [detail['file'] for detail in json.loads(capsys.readouterr().out)]
    assert files == [str(tmp_path / 'views' / 'broken.twig'), str(tmp_path / 'views' / 'valid.twig')]


@pytest.mark.asyncio
async def test_no_arguments_lints_everything(command, views, capsys):
    assert await command.handle(format='json') == 1

    files = [detail['file'] for detail in json.loads(capsys.readouterr().out)]
    assert files == ['broken', 'inline', 'valid']


@pytest.mark.asyncio
async def test_no_arguments_lints_dotted_files_by_path(command, tmp_path, views, write_view, capsys):
    path = write_view('views/app.min.twig', '{{ name }}')

    assert await command.handle(format='json') == 1

    details = json.loads(capsys.readouterr().out)
    assert [detail['file'] for detail in details] == ['broken', 'inline', 'valid', str(path)]
    assert details[-1]['valid'] is True


@pytest.mark.asyncio
async def test_no_arguments_with_only_dotted_files(command, write_view):
    write_view('views/app.min.twig', '{{ name }}')

    assert await command.handle() == 0
