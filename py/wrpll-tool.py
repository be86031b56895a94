#!/usr/bin/python3

assert __name__ == '__main__'

import sys
if sys.version_info < (3, 10):
    print(f'Your python version {sys.version} is too old. ',
          'This program needs 3.10 or later')
    sys.exit(1)

import wrpll.util

sys.exit(wrpll.util.main())
