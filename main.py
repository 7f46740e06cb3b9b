"""Run the Wardbook menu from a source checkout."""

from wardbook.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
