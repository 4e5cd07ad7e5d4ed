"""Start the desktop application."""
import sys

from fourierfun.app.main import main

if __name__ == "__main__":
    sys.exit(main())
