import pytest

from svg_sprite.svg.rewriter import collect_declarations, rewrite, rewrite_with_report


def test_declaration_becomes_class_and_reference_targets_symbol() -> None:
    result = rewrite('<path id="a"/><use xlink:href="#a"/>', "icon")
    assert 'id="a"' not in result
    assert result == '<path class="a"/><use xlink:href="#icon"/>'


def test_existing_class_is_merged_not_overwritten() -> None:
    markup = '<linearGradient class="grad" id="g1"><stop/></linearGradient>'
    assert rewrite(markup, "s") == '<linearGradient class="grad g1"><stop/></linearGradient>'


def test_single_quoted_class_keeps_its_quotes() -> None:
    assert rewrite("<g class='x' id='y'/>", "s") == "<g class='x y'/>"


def test_class_name_is_sanitized() -> None:
    markup = '<clipPath id="clip path:1"><rect/></clipPath>'
    assert rewrite(markup, "s") == '<clipPath class="clip-path-1"><rect/></clipPath>'


def test_reference_before_declaration_is_repaired() -> None:
    markup = '<use href="#p"/><use href="#other"/><path id="p"/>'
    assert rewrite(markup, "s") == '<use href="#s"/><use href="#other"/><path class="p"/>'


def test_paint_server_urls_are_left_alone() -> None:
    markup = '<linearGradient id="g"/><rect fill="url(#g)"/>'
    assert rewrite(markup, "s") == '<linearGradient class="g"/><rect fill="url(#g)"/>'


def test_untouched_tags_keep_their_spelling() -> None:
    markup = '<g  fill="red"><path id="p" d="M0 0.000"/></g>'
    assert rewrite(markup, "s") == '<g  fill="red"><path class="p" d="M0 0.000"/></g>'


def test_root_symbol_wrapper_hands_its_id_to_the_sprite_symbol() -> None:
    markup = '\n<!-- wrapper -->\n<symbol id="keep"><path id="a"/><use href="#keep"/></symbol>\n'
    assert collect_declarations(markup) == {"a": "a"}
    assert rewrite(markup, "s") == (
        '\n<!-- wrapper -->\n<symbol><path class="a"/><use href="#s"/></symbol>\n'
    )


def test_nested_symbol_ids_become_classes() -> None:
    markup = '<g><symbol id="icon"><rect/></symbol></g><use href="#icon"/>'
    assert collect_declarations(markup) == {"icon": "icon"}
    assert rewrite(markup, "s") == '<g><symbol class="icon"><rect/></symbol></g><use href="#s"/>'


def test_sibling_symbols_are_not_a_wrapper() -> None:
    markup = '<symbol id="a"><rect/></symbol><symbol id="b"><circle/></symbol>'
    assert rewrite(markup, "s") == (
        '<symbol class="a"><rect/></symbol><symbol class="b"><circle/></symbol>'
    )


def test_symbol_wrapper_followed_by_content_is_not_a_wrapper() -> None:
    markup = '<symbol id="a"><rect/></symbol><path/>'
    assert rewrite(markup, "s") == '<symbol class="a"><rect/></symbol><path/>'


@pytest.mark.parametrize(
    "markup",
    [
        '<path d="M0 0  L 1.50000 2"/>\n  <circle  r="4" />',
        '<!-- <path id="c"/> --><path/>',
        '<path id="a"',
        "",
    ],
)
def test_markup_without_declarations_is_byte_identical(markup: str) -> None:
    assert rewrite(markup, "s") == markup


def test_report_lists_conversions_and_repairs() -> None:
    report = rewrite_with_report(
        '<defs><path id="a"/><mask id="m"/></defs><use xlink:href="#a"/><use href="#a"/>',
        "shape",
    )
    assert report.converted_ids == ("a", "m")
    assert report.repaired_references == 2
    assert report.markup.count("#shape") == 2
