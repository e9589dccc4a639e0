"""Generator registry: language identifier -> (generate, format) pair.

Adding a target language means adding one entry to each table.
"""

from collections.abc import Callable
from typing import NamedTuple

from ..generators import flow, typescript
from .errors import UnsupportedLanguageError
from .formatting import FormatOptions
from .ir import CodeFileLike, GenerateArgs


class Generator(NamedTuple):
    """A generate function and the formatter for its output."""
    generate: Callable[[GenerateArgs], str | list[CodeFileLike]]
    format: Callable[[str, FormatOptions | None], str]


TYPES_GENERATORS: dict[str, Generator] = {
    "typescript": Generator(generate=typescript.generate, format=typescript.format),
    "flow": Generator(generate=flow.generate, format=flow.format),
}

RESOLVERS_GENERATORS: dict[str, Generator] = {
    "typescript": Generator(generate=typescript.scaffold, format=typescript.format),
    "flow": Generator(generate=flow.scaffold, format=flow.format),
}

SUPPORTED_LANGUAGES = tuple(TYPES_GENERATORS)


def _lookup(table: dict[str, Generator], language: str) -> Generator:
    try:
        return table[language]
    except KeyError:
        # Configuration validation rejects unknown languages before this point
        raise UnsupportedLanguageError(language) from None


def get_types_generator(language: str) -> Generator:
    return _lookup(TYPES_GENERATORS, language)


def get_resolvers_generator(language: str) -> Generator:
    return _lookup(RESOLVERS_GENERATORS, language)
