"""
Main entry point for the modelica-format CLI when run as a module.

This allows the CLI to be executed using:
    python -m modelica_format.cli

or the equivalent console script entry point.
"""

from . import main

if __name__ == '__main__':
    main()
