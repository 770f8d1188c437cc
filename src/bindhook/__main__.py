"""Allow `python -m bindhook`."""

import sys

from bindhook.presentation.cli import main

sys.exit(main())
