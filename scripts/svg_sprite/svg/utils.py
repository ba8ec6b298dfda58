"""XML and SVG utility functions."""

import re
from pathlib import Path

# SVG namespace constants
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

DEFAULT_VIEW_BOX = "0 0 24 24"

VIEW_BOX_PATTERN = re.compile(r"""viewBox=["']([^"']*)["']""")


def escape_xml(text: str) -> str:
    """Escape XML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def find_view_box(svg_content: str, default: str = DEFAULT_VIEW_BOX) -> str:
    """Return the first viewBox attribute value in the markup.

    Args:
        svg_content: Raw SVG markup
        default: Value returned when no viewBox attribute is present

    Returns:
        The viewBox value, unmodified
    """
    match = VIEW_BOX_PATTERN.search(svg_content)
    if match:
        return match.group(1)
    return default


def class_name_for(identifier: str) -> str:
    """Turn a local element id into a class name (non-word chars become hyphens)."""
    return re.sub(r"[^\w-]", "-", identifier)


def load_svg_file(path: Path) -> str:
    """Load SVG file content.

    Args:
        path: Path to SVG file

    Returns:
        SVG file content as string
    """
    return path.read_text(encoding="utf-8", errors="replace")


def save_svg_file(path: Path, content: str) -> None:
    """Save SVG content to file.

    Args:
        path: Path to save SVG file
        content: SVG content to save
    """
    path.write_text(content, encoding="utf-8")
