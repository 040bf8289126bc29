import unittest

from subprop.designation import (
    CodePointOutOfRange,
    DesignationError,
    HexCodepoint,
    MalformedDesignation,
    MalformedHexLiteral,
    NamedCharacter,
    UnknownCharacterName,
    is_hex_literal,
    parse_designation,
    resolve,
    resolve_all,
)


NAME_DATA = (
    ('LATIN SMALL LETTER A', 0x61),
    ('SPACE', 0x20),
    ('HYPHEN', 0x2010),
    ('REPLACEMENT CHARACTER', 0xFFFD),
    ('GRINNING FACE', 0x1F600),
)

HEX_DATA = (
    ('0x41', 0x41),
    ('0X41', 0x41),
    ('0x0', 0),
    ('0x00061', 0x61),
    ('0xfeff', 0xFEFF),
    ('0xD800', 0xD800),
    ('0x10FFFF', 0x10FFFF),
)

MALFORMED_HEX = ('0x', '0xZZ', '0x_41', '0x4_1', '0x-1', '0x 41', '0x41 ')


class TestDesignation(unittest.TestCase):

    def test_classification(self) -> None:
        self.assertTrue(is_hex_literal('0x41'))
        self.assertTrue(is_hex_literal('0X41'))
        self.assertTrue(is_hex_literal('0xZZ'))
        self.assertFalse(is_hex_literal('LATIN SMALL LETTER A'))
        self.assertFalse(is_hex_literal('x41'))

        self.assertEqual(parse_designation('0x41'), HexCodepoint('41'))
        self.assertEqual(parse_designation('0X41'), HexCodepoint('41', '0X'))
        self.assertEqual(parse_designation('SPACE'), NamedCharacter('SPACE'))
        self.assertEqual(str(HexCodepoint('41')), '0x41')
        self.assertEqual(str(HexCodepoint('41', '0X')), '0X41')

    def test_names(self) -> None:
        for name, codepoint in NAME_DATA:
            self.assertEqual(resolve(name), codepoint)
            self.assertEqual(resolve(NamedCharacter(name)), codepoint)

    def test_hex_literals(self) -> None:
        for literal, codepoint in HEX_DATA:
            self.assertEqual(resolve(literal), codepoint)

    def test_unknown_name(self) -> None:
        with self.assertRaises(UnknownCharacterName) as context:
            resolve('NOT A REAL CHARACTER NAME')
        self.assertEqual(context.exception.designation, 'NOT A REAL CHARACTER NAME')
        self.assertIn('NOT A REAL CHARACTER NAME', str(context.exception))

    def test_named_sequence(self) -> None:
        with self.assertRaises(UnknownCharacterName):
            resolve('LATIN CAPITAL LETTER A WITH MACRON AND GRAVE')

    def test_malformed(self) -> None:
        for literal in MALFORMED_HEX:
            with self.assertRaises(MalformedHexLiteral, msg=literal):
                resolve(literal)
        with self.assertRaises(MalformedDesignation):
            resolve('')

    def test_error_keeps_prefix(self) -> None:
        with self.assertRaises(MalformedHexLiteral) as context:
            resolve('0XZZ')
        self.assertEqual(context.exception.designation, '0XZZ')
        self.assertIn('"0XZZ"', str(context.exception))

        with self.assertRaises(CodePointOutOfRange) as out_of_range:
            resolve('0X110000')
        self.assertEqual(out_of_range.exception.designation, '0X110000')

    def test_out_of_range(self) -> None:
        with self.assertRaises(CodePointOutOfRange) as context:
            resolve('0x110000')
        self.assertEqual(context.exception.designation, '0x110000')

    def test_errors_are_value_errors(self) -> None:
        for error in (
            CodePointOutOfRange,
            MalformedDesignation,
            MalformedHexLiteral,
            UnknownCharacterName,
        ):
            self.assertTrue(issubclass(error, DesignationError))
            self.assertTrue(issubclass(error, ValueError))

    def test_resolve_all(self) -> None:
        self.assertEqual(
            resolve_all(['LATIN SMALL LETTER B', '0x61', 'LATIN SMALL LETTER B']),
            [0x62, 0x61, 0x62],
        )
        self.assertEqual(resolve_all([]), [])
        with self.assertRaises(UnknownCharacterName):
            resolve_all(['0x61', 'NOT A REAL CHARACTER NAME', '0xZZ'])
