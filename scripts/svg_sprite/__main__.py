"""CLI entry point for svg_sprite package.

Usage:
    python -m svg_sprite compile icons/ -o sprite.svg
    python -m svg_sprite preview sprite.svg -o preview.html
"""

from .cli import main

if __name__ == "__main__":
    main()
