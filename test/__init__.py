import importlib
import pathlib
import unittest


# Collect the test cases of all test_* modules in this package, so that
# `python -m unittest test` runs them without further discovery.

for direntry in sorted(pathlib.Path(__file__).parent.iterdir()):
    if (
        not direntry.is_file()
        or not direntry.name.startswith('test_')
        or direntry.suffix != '.py'
    ):
        continue

    module = importlib.import_module(f'test.{direntry.stem}')

    for name in dir(module):
        if name.startswith('_'):
            continue

        value = getattr(module, name)
        if isinstance(value, type) and issubclass(value, unittest.TestCase):
            globals()[name] = value
