"""
subprop's command line tool.
"""

import argparse
from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager
import logging
from pathlib import Path
import sys
from textwrap import dedent
import traceback
from types import TracebackType

from .codegen import DEFAULT_NAME
from .designation import DesignationError
from .property import CharacterProperty
from . import __version__


# --------------------------------------------------------------------------------------


class UserError(Exception):
    """
    An error indicating invalid user input. When code raises this error, it
    probably is *not* helpful to print an exception trace.
    """


class user_error(AbstractContextManager['user_error']):
    """
    A context manager to turn one or more exceptions into a user error. If the
    context manager tries to exit with one of the listed exception types, it
    instead raises a `UserError` with the message `msg.format(*args, **kwargs)`.
    """

    def __init__(
        self,
        exc_types: type[BaseException] | Sequence[type[BaseException]],
        msg: str,
        *args: object,
        **kwargs: object,
    ) -> None:
        if isinstance(exc_types, type):
            exc_types = (exc_types,)

        self._exc_types = tuple(exc_types)
        self._msg = msg
        self._args = args
        self._kwargs = kwargs

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        _: TracebackType | None,
    ) -> None:
        if exc_type is not None and issubclass(exc_type, self._exc_types):
            msg = self._msg.format(*self._args, **self._kwargs)
            raise UserError(msg) from exc_value


def describe_error(error: BaseException) -> str:
    """Describe the error in a few words, without errno or file name."""
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


# --------------------------------------------------------------------------------------


def width_limited_formatter(prog: str) -> argparse.HelpFormatter:
    return argparse.RawTextHelpFormatter(prog, width=70)


def configure_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='subprop',
        description='Generate the Perl subroutine for a user-defined character\n'
        'property from Unicode character names and code points.',
        epilog=dedent("""
            Each designation is either a Unicode character name, such as
            "LATIN SMALL LETTER A", or a hexadecimal code point with leading
            "0x", such as "0x61". Remember to quote names, since they contain
            spaces. Perl requires the subroutine name to start with "In" or
            "Is". Since Perl looks up character properties at compile time,
            you need to paste the generated code into your program.
        """),
        formatter_class=width_limited_formatter,
    )

    input_group = parser.add_argument_group('select characters')
    input_group.add_argument(
        '--from-file', '-f',
        action='append',
        default=[],
        metavar='PATH',
        help='read additional designations from file, one per\n'
        'line; blank lines and "#" comments are ignored',
    )
    input_group.add_argument(
        'designations',
        nargs='*',
        help='Unicode character names or "0x"-prefixed\nhexadecimal code points',
    )

    output_group = parser.add_argument_group('control output')
    output_group.add_argument(
        '--name', '-n',
        default=DEFAULT_NAME,
        help=f'use name for the subroutine (default is {DEFAULT_NAME})',
    )
    output_group.add_argument(
        '--show-ranges', '-r',
        action='store_true',
        help='list the ranges in U+ notation instead of code',
    )
    output_group.add_argument(
        '--verbose', '-v',
        default=0,
        action='count',
        help='use verbose mode to enable instructive logging;\n'
        'may be used twice',
    )

    about_group = parser.add_argument_group('about this tool')
    about_group.add_argument(
        '--version', '-V',
        action='store_true',
        help='display the tool version and exit',
    )

    return parser


def read_designations(path: str) -> Iterator[str]:
    """Read designations from file, skipping blank lines and comments."""
    with open(path, mode='r', encoding='utf8') as file:
        for line in file:
            line, _, _ = line.partition('#')
            line = line.strip()
            if line:
                yield line


# --------------------------------------------------------------------------------------


def run(arguments: Sequence[str]) -> int:
    parser = configure_parser()
    options = parser.parse_args(arguments[1:])

    logging.basicConfig(
        format='[%(levelname)s] %(name)s: %(message)s',
        level=(
            logging.WARNING if options.verbose == 0
            else logging.INFO if options.verbose == 1
            else logging.DEBUG
        ),
    )

    try:
        return process(options)
    except UserError as x:
        print(f'Error: {x.args[0]}', file=sys.stderr)
        if x.__cause__ is not None:
            print(f'In particular: {describe_error(x.__cause__)}', file=sys.stderr)
        return 1
    except Exception as x:
        print(
            'subprop encountered an unexpected error. For details, please see the\n'
            'exception trace below.\n',
            file=sys.stderr,
        )
        print(''.join(traceback.format_exception(x)), file=sys.stderr)
        return 1


def process(options: argparse.Namespace) -> int:
    if options.version:
        print(f'subprop {__version__}')
        return 0

    designations: list[str] = list(options.designations)
    for path in options.from_file:
        with user_error(
            (OSError, UnicodeDecodeError),
            'unable to read designations from "{}"',
            path,
        ):
            designations.extend(read_designations(path))

    if len(designations) == 0:
        raise UserError(
            'There are no characters to include. Maybe try again with\n'
            '"LATIN SMALL LETTER A" as argument, or with "-h" to see all options.'
        )

    prop = CharacterProperty(designations)
    with user_error(DesignationError, 'unable to resolve all designations'):
        if options.show_ranges:
            for range in prop.get_ranges():
                print(repr(range))
        else:
            print(prop.as_code(options.name), end='')

    return 0
