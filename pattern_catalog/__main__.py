import sys

from pattern_catalog.cli.main import main

sys.exit(main())
