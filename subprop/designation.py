"""
Designations of characters.

A designation identifies a single character either by its Unicode name, e.g.,
`LATIN SMALL LETTER A`, i.e., the `...` part of the `\\N{...}` notation, or by
its hexadecimal code point with a leading `0x`, e.g., `0x61`. The latter is
useful for characters that don't have a name. This module classifies
designations as `HexCodepoint` or `NamedCharacter` and resolves them to code
points. Names are looked up in the Unicode Character Database bundled with
Python's `unicodedata` module, which also recognizes formal name aliases.
"""

from collections.abc import Iterable
from dataclasses import dataclass
import logging
import re
import unicodedata
from typing import TypeAlias

from .codepoint import CodePoint


_logger = logging.getLogger(__name__)


_HEX_DIGITS = re.compile(r'[0-9A-Fa-f]+')


# --------------------------------------------------------------------------------------


class DesignationError(ValueError):
    """An error indicating that a designation cannot be resolved."""

    def __init__(self, designation: str, message: str) -> None:
        super().__init__(message)
        self.designation = designation


class MalformedDesignation(DesignationError):
    """An error indicating an empty designation."""


class MalformedHexLiteral(DesignationError):
    """
    An error indicating a designation that starts with `0x` but does not
    continue with hexadecimal digits only.
    """


class UnknownCharacterName(DesignationError):
    """
    An error indicating a designation that is not the name of exactly one
    character.
    """


class CodePointOutOfRange(DesignationError):
    """An error indicating a hexadecimal value beyond U+10FFFF."""


# --------------------------------------------------------------------------------------


def is_hex_literal(text: str) -> bool:
    """Determine whether the designation uses hexadecimal notation."""
    return text[:2] in ('0x', '0X')


@dataclass(frozen=True, slots=True)
class HexCodepoint:
    """
    A designation in hexadecimal notation. The digits exclude the prefix, which
    is either `0x` or `0X` as written.
    """

    digits: str
    prefix: str = '0x'

    def resolve(self) -> CodePoint:
        designation = str(self)
        if not _HEX_DIGITS.fullmatch(self.digits):
            raise MalformedHexLiteral(
                designation, f'"{designation}" is not a valid hexadecimal literal'
            )

        value = int(self.digits, 16)
        if value > CodePoint.MAX:
            raise CodePointOutOfRange(
                designation, f'"{designation}" is beyond U+10FFFF'
            )
        return CodePoint(value)

    def __str__(self) -> str:
        return f'{self.prefix}{self.digits}'


@dataclass(frozen=True, slots=True)
class NamedCharacter:
    """A designation by Unicode character name or name alias."""

    name: str

    def resolve(self) -> CodePoint:
        try:
            character = unicodedata.lookup(self.name)
        except KeyError:
            raise UnknownCharacterName(
                self.name, f'"{self.name}" is not a Unicode character name'
            ) from None

        # lookup() also accepts named sequences, which are not one character.
        if len(character) != 1:
            raise UnknownCharacterName(
                self.name, f'"{self.name}" names a sequence, not a character'
            )
        return CodePoint(ord(character))

    def __str__(self) -> str:
        return self.name


Designation: TypeAlias = HexCodepoint | NamedCharacter


def parse_designation(text: str) -> Designation:
    """Classify the text as hexadecimal or named designation."""
    if not text:
        raise MalformedDesignation(text, 'a designation must not be empty')
    if is_hex_literal(text):
        return HexCodepoint(text[2:], text[:2])
    return NamedCharacter(text)


# --------------------------------------------------------------------------------------


def resolve(designation: str | Designation) -> CodePoint:
    """Resolve the designation to its code point."""
    if isinstance(designation, str):
        designation = parse_designation(designation)
    codepoint = designation.resolve()
    _logger.debug('resolved "%s" to %r', designation, codepoint)
    return codepoint


def resolve_all(designations: Iterable[str | Designation]) -> list[CodePoint]:
    """
    Resolve all designations, in order. This function fails on the first
    designation that does not resolve.
    """
    return [resolve(d) for d in designations]
