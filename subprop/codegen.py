"""
Generate Perl code for user-defined character properties.

As described in perlunicode, a Perl program can define its own character
properties with a subroutine that returns the allowed code points as lines of
hexadecimal numbers, one line per code point or range of code points. Since
such subroutines are looked up at compile time, subprop cannot install them.
Instead, it generates their source code for pasting into a program:

    sub InMySet { <<'END' }
    61 64
    2010
    END

Each line lists either a single code point or the first and last code point of
a range, separated by a single space, in uppercase hexadecimal without prefix
or padding. The framing lines are reproduced exactly, including the heredoc
terminator.
"""

from collections.abc import Iterable, Iterator
import logging
import re

from .codepoint import CodePointRange


_logger = logging.getLogger(__name__)


DEFAULT_NAME = 'InFoo'

# perlunicode: the name must be an identifier starting with "In" or "Is".
_PROPERTY_NAME = re.compile(r'I[ns]\w*', re.ASCII)


def is_property_name(name: str) -> bool:
    """Determine whether Perl accepts the name for a character property."""
    return _PROPERTY_NAME.fullmatch(name) is not None


def to_hex(value: int) -> str:
    """Format the value as uppercase hexadecimal with as few digits as possible."""
    return f'{value:X}'


def format_range(range: CodePointRange) -> str:
    """Format the range as one line of the subroutine body."""
    if range.is_singleton():
        return to_hex(range.start)
    return f'{to_hex(range.start)} {to_hex(range.stop)}'


def generate_code(name: str, ranges: Iterable[CodePointRange]) -> Iterator[str]:
    """Generate the lines of the character property subroutine."""
    if not is_property_name(name):
        _logger.warning(
            'Perl requires character property names to start with "In" or "Is",'
            ' but "%s" does not', name
        )

    yield f"sub {name} {{ <<'END' }}"
    for range in ranges:
        yield format_range(range)
    yield 'END'


def render(name: None | str, ranges: Iterable[CodePointRange]) -> str:
    """Render the character property subroutine, with newline after every line."""
    if name is None:
        name = DEFAULT_NAME
    return ''.join(f'{line}\n' for line in generate_code(name, ranges))
