#!./venv/bin/python

import os
import shutil
import subprocess
import sys
import traceback
import unittest


if __name__ == '__main__':
    successful = False
    stream = sys.stdout

    def println(s: str = '') -> None:
        if s:
            stream.write(s)
        stream.write('\n')
        stream.flush()

    def printbar(title: str) -> None:
        println()
        println(f'─── {title} {"─" * (70 - len(title))}')

    try:
        printbar('§0  Setup')
        println(f'    Python:    {sys.executable}')
        println(f'    Directory: {os.getcwd()}')
        for path in sys.path:
            println(f'    Path:      {path}')
        println()

        printbar('§1  Type Checking')
        pyright = shutil.which('pyright')
        if pyright is None:
            println('    pyright is not installed; skipping type checks')
        else:
            subprocess.run([pyright], check=True)
        println()

        printbar('§2  Unit Testing')
        runner = unittest.main(
            module='test',
            exit=False,
            testRunner=unittest.TextTestRunner(stream=stream, verbosity=2),
        )
        successful = runner.result.wasSuccessful()

    except subprocess.CalledProcessError:
        println('subprop failed to type check!')
        sys.exit(1)
    except Exception as x:
        println(''.join(traceback.format_exception(x)))

    sys.exit(not successful)
