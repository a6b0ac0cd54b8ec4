import sys

from weatherchart.cli import main

sys.exit(main())
