"""Allow ``python -m currencydata``."""

import sys

from currencydata.cli import main

sys.exit(main())
