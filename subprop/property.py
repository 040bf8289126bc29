"""
User-defined character properties.

A `CharacterProperty` holds the designations of the characters to allow. Each
designation is either a Unicode character name, e.g., `LATIN SMALL LETTER A`,
or a hexadecimal code point with leading `0x`, e.g., `0x61`:

    >>> prop = CharacterProperty.of(
    ...     'LATIN SMALL LETTER A',
    ...     'LATIN SMALL LETTER B',
    ...     'LATIN SMALL LETTER C',
    ...     'LATIN SMALL LETTER D',
    ... )
    >>> print(prop.as_code('InMySet'), end='')
    sub InMySet { <<'END' }
    61 64
    END

The designations are a plain list, so code can freely read, index, append to,
or otherwise modify `characters`. Both `get_ranges()` and `as_code()` resolve
the current designations anew on every invocation and fail on the first
designation that does not resolve.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
import logging

from .codegen import render
from .codepoint import RangeSet, rangify
from .designation import resolve_all


_logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CharacterProperty:

    characters: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Don't alias the caller's sequence.
        self.characters = list(self.characters)

    @classmethod
    def of(cls, *characters: str) -> 'CharacterProperty':
        """Create a character property from the given designations."""
        return cls(list(characters))

    def get_ranges(self) -> RangeSet:
        """
        Resolve the designations and merge the resulting code points into the
        minimal, sorted set of ranges.
        """
        ranges = rangify(resolve_all(self.characters))
        _logger.info(
            'merged %d designations into %d ranges', len(self.characters), len(ranges)
        )
        return ranges

    def as_code(self, name: None | str = None) -> str:
        """
        Generate the Perl subroutine for this character property. The name
        defaults to `InFoo`.
        """
        return render(name, self.get_ranges())


def get_ranges(characters: Iterable[str]) -> RangeSet:
    """Determine the ranges for the designated characters."""
    return CharacterProperty(list(characters)).get_ranges()


def as_code(characters: Iterable[str], name: None | str = None) -> str:
    """Generate the Perl subroutine for the designated characters."""
    return CharacterProperty(list(characters)).as_code(name)
