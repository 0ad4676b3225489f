"""
Entry point for running the CLI as a module:
    python -m resulttypes
"""

from .cli import main

if __name__ == "__main__":
    main()
