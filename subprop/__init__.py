"""
Support for user-defined character properties.

subprop turns a list of Unicode character names or hexadecimal code points
into the minimal set of code point ranges and renders them as the Perl
subroutine that defines a custom character property.
"""

__version__ = '0.1.0'

from .codepoint import CodePoint, CodePointRange, RangeSet, rangify
from .designation import (
    CodePointOutOfRange,
    DesignationError,
    HexCodepoint,
    MalformedDesignation,
    MalformedHexLiteral,
    NamedCharacter,
    UnknownCharacterName,
    resolve,
)
from .property import CharacterProperty, as_code, get_ranges

__all__ = (
    'CharacterProperty',
    'CodePoint',
    'CodePointOutOfRange',
    'CodePointRange',
    'DesignationError',
    'HexCodepoint',
    'MalformedDesignation',
    'MalformedHexLiteral',
    'NamedCharacter',
    'RangeSet',
    'UnknownCharacterName',
    'as_code',
    'get_ranges',
    'rangify',
    'resolve',
)
