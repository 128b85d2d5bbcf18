import sys

from pcn.cli import main

sys.exit(main())
