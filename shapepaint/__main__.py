"""Entry point for running ShapePaint as a module: python -m shapepaint"""

import sys
from .ui import main

if __name__ == "__main__":
    sys.exit(main())
