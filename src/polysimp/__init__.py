import collections.abc
import configparser
import json
import os
import pathlib
import typing

from polysimp.core import iotools
from polysimp.core.errors import InterpreterError
from polysimp.core.interpreter import Interpreter, simplify


# read version from installed package
from importlib.metadata import version
__version__ = version("polysimp")


INI = 'polysimp.ini'
"""The name of the settings file."""


def config_paths() -> typing.List[typing.Optional[iotools.PathLike]]:
    """The directories to search for a settings file, in order."""
    home = pathlib.Path('~').expanduser()
    return [
        pathlib.Path.cwd(), # The current working directory
        home, # The user's home directory
        home / '.config', # Linux standard (local)
        '/etc/polysimp', # Linux standard (global)
        os.environ.get('POLYSIMP_INI'), # A known environment variable
        pathlib.Path(__file__).parent, # The package top
    ]


class Environment(collections.abc.Mapping):
    """A collection of settings from one section of the settings file."""

    def __init__(self, name: str, path: iotools.PathLike=None) -> None:
        self.name = name
        """The name of the section to select."""
        if path is None:
            path = iotools.search(config_paths(), INI)
        else:
            path = iotools.full_path(path)
        config = configparser.ConfigParser()
        if path is not None:
            config.read(path)
        self._config = config[self.name] if config.has_section(name) else {}
        self.path = path

    def __len__(self) -> int:
        """The number of available parameter values."""
        return len(self._config)

    def __iter__(self):
        """Iterate over available parameter values."""
        yield from self._config

    def __getitem__(self, key: str):
        """Access parameter values by mapping key."""
        if key in self._config:
            return self._config[key]
        raise KeyError(
            f"{__package__} has no value for {key!r} in [{self.name}]"
        ) from None

    def __str__(self) -> str:
        return json.dumps(
            dict(self._config),
            indent=4,
            sort_keys=True,
        )

    def __repr__(self) -> str:
        return f"{__package__}[{self.name}]({self.path}):\n{self}"


def settings(path: iotools.PathLike=None) -> typing.Dict[str, typing.Any]:
    """Collect `~interpreter.Interpreter` arguments from the settings file.

    Symbols form a string of single characters and keywords form a
    whitespace-separated list. A missing value leaves the interpreter default
    in place.
    """
    lexing = Environment('lexer', path=path)
    rendering = Environment('render', path=path)
    options = {}
    if 'symbols' in lexing:
        options['symbols'] = set(''.join(lexing['symbols'].split()))
    if 'keywords' in lexing:
        options['keywords'] = set(lexing['keywords'].split())
    if 'joiner' in rendering:
        options['joiner'] = rendering['joiner'].strip('"')
    return options
