from pathlib import Path

from svg_sprite.compiler import compile_sprite
from svg_sprite.svg.preview import build_preview_html, list_symbols, symbol_ids, write_preview

GOOD = '<svg viewBox="0 0 10 10"><path id="a"/><use xlink:href="#a"/></svg>'


def test_list_symbols_reads_compiled_sprite() -> None:
    document = compile_sprite([("Icon", GOOD), ("icon", GOOD)])
    assert list_symbols(document.markup) == [("icon", "icon"), ("icon-1", "icon-1")]
    assert symbol_ids(document.markup) == document.symbol_ids


def test_preview_html_has_one_tile_per_symbol() -> None:
    document = compile_sprite([("Home", GOOD), ("Gear", GOOD)])
    html = build_preview_html(document.markup, title="Icons")
    assert html.startswith("<!DOCTYPE html>")
    assert document.markup in html
    assert "<h1>Icons (2)</h1>" in html
    assert '<use href="#home" xlink:href="#home" class="home"/>' in html
    assert '<use href="#gear" xlink:href="#gear" class="gear"/>' in html


def test_write_preview(tmp_path: Path) -> None:
    sprite = tmp_path / "sprite.svg"
    sprite.write_text(compile_sprite([("one", GOOD)]).markup, encoding="utf-8")
    output = tmp_path / "preview.html"
    assert write_preview(sprite, output) == 1
    assert '<use href="#one"' in output.read_text(encoding="utf-8")


def test_list_symbols_accepts_editor_prefixes() -> None:
    raw = (
        '<svg xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" '
        'xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd" viewBox="0 0 4 4">'
        '<sodipodi:namedview id="nv"/><g inkscape:label="Layer 1"><rect/></g></svg>'
    )
    document = compile_sprite([("Drawing", raw)])
    assert list_symbols(document.markup) == [("drawing", "drawing")]
