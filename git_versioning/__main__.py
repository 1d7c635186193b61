"""
Entry point for python -m git_versioning

Allows running the package as a module:
    python -m git_versioning
"""

from .cli import main

if __name__ == '__main__':
    main()
