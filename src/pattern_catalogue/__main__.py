"""Allow ``python -m pattern_catalogue``."""
import sys

from pattern_catalogue.cli.main import main

sys.exit(main())
