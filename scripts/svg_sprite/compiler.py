"""Sprite assembly: compile a batch of fragments into one <symbol> sprite."""

import logging
from typing import Iterable

from .config import (
    CompiledDocument,
    ExtractionFailure,
    Fragment,
    SpriteConfig,
    SymbolUnit,
)
from .errors import EmptyBatchError, NoUsableContentError
from .svg.allocator import IdentifierRegistry
from .svg.extractor import extract
from .svg.rewriter import rewrite_with_report
from .svg.utils import SVG_NS, XLINK_NS, escape_xml

logger = logging.getLogger(__name__)

PLACEHOLDER_TEMPLATE = (
    '<rect width="24" height="24" fill="currentColor" opacity="0.2" class="placeholder-rect"/>'
    '<text x="50%" y="50%" font-family="sans-serif" font-size="5" text-anchor="middle" '
    'dominant-baseline="middle" class="placeholder-text">{label}</text>'
)

RESERVED_PREFIXES = frozenset({"xlink", "xml", "xmlns"})
DOCUMENT_CLOSE = "</svg>"


def document_open(namespaces: dict[str, str] | None = None) -> str:
    """Return the sprite's root start tag, declaring any extra prefixes."""
    extra = "".join(
        f' xmlns:{prefix}="{escape_xml(uri)}"' for prefix, uri in (namespaces or {}).items()
    )
    return f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}"{extra} style="display: none;">'


def placeholder_body(label: str = "No Content") -> str:
    """Return the fallback body used for fragments without usable content.

    The body is drawn on a 24x24 grid, so placeholder symbols always carry
    ``config.default_view_box`` rather than whatever viewBox the failed
    fragment declared. Keep the default at "0 0 24 24" for it to fill the
    symbol.
    """
    return PLACEHOLDER_TEMPLATE.format(label=escape_xml(label))


def render_symbol(symbol: SymbolUnit, indent: str = "  ") -> str:
    """Serialize one SymbolUnit as a <symbol> block."""
    return (
        f'{indent}<symbol id="{escape_xml(symbol.symbol_id)}" '
        f'class="{escape_xml(symbol.css_class)}" '
        f'viewBox="{escape_xml(symbol.view_box)}">\n'
        f"{indent * 2}{symbol.body}\n"
        f"{indent}</symbol>\n"
    )


def _as_fragment(item: Fragment | tuple[str, str | bytes]) -> Fragment:
    if isinstance(item, Fragment):
        return item
    name, raw_markup = item
    return Fragment(name=name, raw_markup=raw_markup)


def _merge_namespaces(merged: dict[str, str], declared: dict[str, str], symbol_id: str) -> None:
    for prefix, uri in declared.items():
        if prefix in RESERVED_PREFIXES:
            continue
        known = merged.setdefault(prefix, uri)
        if known != uri:
            logger.warning(
                "'%s' binds prefix '%s' to %s; keeping %s", symbol_id, prefix, uri, known
            )


def compile_sprite(
    fragments: Iterable[Fragment | tuple[str, str | bytes]],
    config: SpriteConfig | None = None,
) -> CompiledDocument:
    """Compile fragments into a single sprite document.

    Every fragment yields exactly one <symbol>, in input order. Fragments
    whose content cannot be extracted get a visible placeholder body instead
    of being dropped.

    Args:
        fragments: Fragments (or (name, markup) pairs) in the desired order
        config: Sprite configuration

    Returns:
        CompiledDocument with the sprite markup, its symbols and diagnostics

    Raises:
        EmptyBatchError: No fragments were given
        NoUsableContentError: Every fragment degraded to a placeholder
    """
    config = config or SpriteConfig()
    batch = [_as_fragment(item) for item in fragments]
    if not batch:
        raise EmptyBatchError()

    registry = IdentifierRegistry(strict=config.strict_ids, prefix=config.id_prefix)
    symbols: list[SymbolUnit] = []
    diagnostics: list[str] = []
    namespaces: dict[str, str] = {}

    for index, fragment in enumerate(batch):
        symbol_id = registry.allocate(fragment.name)
        logger.debug("Processing fragment %d '%s' as '%s'", index, fragment.name, symbol_id)

        extracted = extract(fragment.raw_markup, config)
        body = ""
        view_box = config.default_view_box
        if isinstance(extracted, ExtractionFailure):
            reason = extracted.reason
        else:
            view_box = extracted.view_box
            _merge_namespaces(namespaces, extracted.namespaces, symbol_id)
            report = rewrite_with_report(extracted.inner_markup, symbol_id)
            body = report.markup.strip()
            reason = "content was empty after rewriting"
            if report.repaired_references:
                diagnostics.append(
                    f"{symbol_id}: retargeted {report.repaired_references} "
                    f"reference(s) to the symbol itself"
                )

        placeholder = not body
        if placeholder:
            body = placeholder_body(config.placeholder_text)
            view_box = config.default_view_box
            note = f"{symbol_id}: {reason}; using placeholder"
            diagnostics.append(note)
            logger.warning("Using placeholder for '%s' (%s)", symbol_id, reason)

        symbols.append(
            SymbolUnit(
                symbol_id=symbol_id,
                css_class=symbol_id,
                view_box=view_box,
                body=body,
                source_name=fragment.name,
                placeholder=placeholder,
            )
        )

    if all(symbol.placeholder for symbol in symbols):
        raise NoUsableContentError(diagnostics=diagnostics)

    markup = (
        document_open(namespaces)
        + "\n"
        + "".join(render_symbol(symbol, config.indent) for symbol in symbols)
        + DOCUMENT_CLOSE
    )
    return CompiledDocument(markup=markup, symbols=symbols, diagnostics=diagnostics)
