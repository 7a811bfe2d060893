#!/usr/bin/env python3
"""SimTimer — entry point.

Run with:
    python main.py
    python -m simtimer
"""

from simtimer.__main__ import main


if __name__ == "__main__":
    main()
