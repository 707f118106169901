import sys

from pyweibull.cli import main

sys.exit(main())
