"""Package entry point for ``python -m tinypio``.

WHY: Users run the toolkit as ``python -m tinypio validate prog.pio`` or
``python -m tinypio serve`` without installing console scripts.

HOW: Delegates straight to the CLI's main() and exits with its status.
"""

import sys

if __name__ == "__main__":
    from tinypio.cli import main
    sys.exit(main())
