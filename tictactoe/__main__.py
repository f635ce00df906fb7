"""Allow `python -m tictactoe`."""

import sys

from .cli import main

sys.exit(main())
