"""python -m modforge."""

import sys

from modforge.presentation.cli import main

sys.exit(main())
