import sys

from worktime.cli import main

sys.exit(main())
