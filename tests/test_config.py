import pathlib

import pytest

import polysimp
from polysimp.core import iotools
from polysimp.core import lexer


@pytest.fixture
def inifile(tmp_path: pathlib.Path):
    """A custom settings file in a temporary directory."""
    path = tmp_path / polysimp.INI
    path.write_text(
        "[lexer]\n"
        "symbols = + - ^\n"
        "keywords = sin cos\n"
        "\n"
        "[render]\n"
        "joiner = \", \"\n"
    )
    return path


@pytest.mark.config
def test_default_settings():
    """The packaged settings reproduce the interpreter defaults."""
    path = pathlib.Path(polysimp.__file__).parent / polysimp.INI
    options = polysimp.settings(path)
    assert options['symbols'] == set(lexer.SYMBOLS)
    assert options['keywords'] == set(lexer.KEYWORDS)
    assert options['joiner'] == ' + '


@pytest.mark.config
def test_environment(inifile: pathlib.Path):
    """Access one section of a settings file as a mapping."""
    environment = polysimp.Environment('lexer', path=inifile)
    assert environment.path == inifile.resolve()
    assert set(environment) == {'symbols', 'keywords'}
    assert len(environment) == 2
    assert environment['keywords'] == 'sin cos'
    with pytest.raises(KeyError):
        environment['joiner']
    assert len(polysimp.Environment('missing', path=inifile)) == 0


@pytest.mark.config
def test_custom_settings(inifile: pathlib.Path):
    """Build interpreter options from a custom settings file."""
    options = polysimp.settings(inifile)
    assert options == {
        'symbols': {'+', '-', '^'},
        'keywords': {'sin', 'cos'},
        'joiner': ', ',
    }
    assert polysimp.simplify('y + x', **options) == 'x, y'


@pytest.mark.config
def test_search(
    inifile: pathlib.Path,
    monkeypatch: pytest.MonkeyPatch,
):
    """Find a settings file in the current directory first."""
    monkeypatch.chdir(inifile.parent)
    assert polysimp.Environment('render').path == inifile.resolve()
    assert iotools.search([None, inifile.parent], polysimp.INI) == (
        inifile.resolve()
    )
    assert iotools.search([inifile.parent / 'nowhere'], polysimp.INI) is None


@pytest.mark.config
def test_missing_file(tmp_path: pathlib.Path):
    """Refuse an explicit path that does not exist."""
    with pytest.raises(iotools.NonExistentPathError):
        polysimp.settings(tmp_path / 'nothing.ini')
