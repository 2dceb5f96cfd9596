"""
Package entry point.

Allows running the tool via:

    python -m scheduledata

This simply forwards execution to scheduledata.cli.main().
"""

from scheduledata.cli import main

if __name__ == "__main__":
    main()
