import unittest

from subprop.codegen import (
    DEFAULT_NAME,
    format_range,
    generate_code,
    is_property_name,
    render,
    to_hex,
)
from subprop.codepoint import CodePointRange, rangify


class TestCodegen(unittest.TestCase):

    def test_to_hex(self) -> None:
        self.assertEqual(to_hex(0), '0')
        self.assertEqual(to_hex(0x61), '61')
        self.assertEqual(to_hex(0xFEFF), 'FEFF')
        self.assertEqual(to_hex(0x2010), '2010')
        self.assertEqual(to_hex(0x10FFFF), '10FFFF')

    def test_format_range(self) -> None:
        self.assertEqual(format_range(CodePointRange.of(0x61)), '61')
        self.assertEqual(format_range(CodePointRange.of(0x61, 0x64)), '61 64')
        self.assertEqual(format_range(CodePointRange.of(0xA, 0x1F600)), 'A 1F600')

    def test_property_name(self) -> None:
        self.assertTrue(is_property_name('InFoo'))
        self.assertTrue(is_property_name('IsDigitLike_2'))
        self.assertFalse(is_property_name('MySet'))
        self.assertFalse(is_property_name('In Foo'))
        self.assertFalse(is_property_name('in_foo'))

    def test_generate_code(self) -> None:
        lines = list(generate_code('InMySet', rangify([0x61, 0x62, 0x2010])))
        self.assertEqual(lines, ["sub InMySet { <<'END' }", '61 62', '2010', 'END'])

    def test_render(self) -> None:
        self.assertEqual(DEFAULT_NAME, 'InFoo')
        self.assertEqual(render(None, []), "sub InFoo { <<'END' }\nEND\n")
        self.assertEqual(
            render('InLetters', rangify([0x41, 0x42, 0x43, 0x61])),
            "sub InLetters { <<'END' }\n41 43\n61\nEND\n",
        )

    def test_render_with_unusual_name(self) -> None:
        with self.assertLogs('subprop.codegen', level='WARNING') as logs:
            code = render('MySet', rangify([0x61]))
        self.assertEqual(code, "sub MySet { <<'END' }\n61\nEND\n")
        self.assertIn('MySet', logs.output[0])
