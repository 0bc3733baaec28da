import sys

from SSCE.cli import main

sys.exit(main())
