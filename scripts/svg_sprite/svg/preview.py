"""HTML preview page for a compiled sprite."""

import xml.etree.ElementTree as ET
from pathlib import Path

from .utils import SVG_NS, escape_xml, load_svg_file

PREVIEW_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; margin: 1rem; }}
.grid {{ display: flex; flex-wrap: wrap; gap: 1rem; }}
.tile {{ display: flex; flex-direction: column; align-items: center; width: 5rem; }}
.tile svg {{ width: 3rem; height: 3rem; padding: 0.5rem; border: 1px solid #ccc; color: #3b82f6; }}
.tile span {{ font-size: 0.7rem; color: #6b7280; overflow: hidden; text-overflow: ellipsis; max-width: 100%; }}
</style>
</head>
<body>
{sprite}
<h1>{title} ({count})</h1>
<div class="grid">
{tiles}
</div>
</body>
</html>
"""

TILE_TEMPLATE = (
    '<div class="tile"><svg><use href="#{id}" xlink:href="#{id}" class="{cls}"/></svg>'
    '<span title="{id}">{id}</span></div>'
)


def list_symbols(sprite_markup: str) -> list[tuple[str, str]]:
    """Return (id, class) for every <symbol> in a compiled sprite.

    Args:
        sprite_markup: Sprite document text

    Returns:
        List of (id, class) pairs in document order

    Raises:
        ET.ParseError: The sprite is not well-formed XML
    """
    root = ET.fromstring(sprite_markup)
    symbols = []
    for symbol in root.iter(f"{{{SVG_NS}}}symbol"):
        symbol_id = symbol.get("id")
        if symbol_id:
            symbols.append((symbol_id, symbol.get("class", symbol_id)))
    return symbols


def symbol_ids(sprite_markup: str) -> list[str]:
    """Return the ids of all symbols in a compiled sprite."""
    return [symbol_id for symbol_id, _ in list_symbols(sprite_markup)]


def build_preview_html(sprite_markup: str, title: str = "SVG Sprite Preview") -> str:
    """Build an HTML page that inlines the sprite and shows every symbol.

    Args:
        sprite_markup: Compiled sprite document
        title: Page heading

    Returns:
        Complete HTML document
    """
    symbols = list_symbols(sprite_markup)
    tiles = "\n".join(
        TILE_TEMPLATE.format(id=escape_xml(symbol_id), cls=escape_xml(css_class))
        for symbol_id, css_class in symbols
    )
    return PREVIEW_TEMPLATE.format(
        title=escape_xml(title),
        count=len(symbols),
        sprite=sprite_markup,
        tiles=tiles,
    )


def write_preview(sprite_path: Path, output_path: Path) -> int:
    """Write a preview page for a sprite file.

    Args:
        sprite_path: Compiled sprite SVG
        output_path: HTML file to write

    Returns:
        Number of symbols shown
    """
    sprite_markup = load_svg_file(sprite_path)
    html = build_preview_html(sprite_markup, title=f"{sprite_path.name} preview")
    output_path.write_text(html, encoding="utf-8")
    return len(list_symbols(sprite_markup))
