"""Allows ``python -m pathtree``."""
from pathtree.cli import main

if __name__ == "__main__":
    main()
