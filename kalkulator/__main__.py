import sys

from kalkulator.cli import main

sys.exit(main())
