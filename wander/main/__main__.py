"""
Main module entry point.

This allows running the command line as: python -m wander.main
"""

from .cli import main

if __name__ == "__main__":
    main()
