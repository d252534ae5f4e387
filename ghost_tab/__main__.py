import sys

from ghost_tab.cli import main

if __name__ == "__main__":
    sys.exit(main())
