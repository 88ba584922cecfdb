"""
Launch the responsive grid demo window.

Loads the GRID_* settings and hands control to desktop_ui.app.main(),
whose return value becomes the process exit status.
"""
import sys
from desktop_ui.app import main

if __name__ == "__main__":
    sys.exit(main())
