"""Allow running as ``python -m newstime_console``."""

from newstime_console.cli import main

if __name__ == "__main__":
    main()
