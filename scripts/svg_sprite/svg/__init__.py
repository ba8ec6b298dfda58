"""SVG text surgery for sprite compilation."""

from .utils import escape_xml, find_view_box, class_name_for, SVG_NS, XLINK_NS
from .tokenizer import Tag, Token, parse_tag, tokenize
from .extractor import extract
from .allocator import IdentifierRegistry
from .rewriter import RewriteReport, collect_declarations, rewrite, rewrite_with_report
from .preview import build_preview_html, list_symbols, symbol_ids

__all__ = [
    # Utils
    "escape_xml",
    "find_view_box",
    "class_name_for",
    "SVG_NS",
    "XLINK_NS",
    # Tokenizer
    "Tag",
    "Token",
    "parse_tag",
    "tokenize",
    # Extractor
    "extract",
    # Allocator
    "IdentifierRegistry",
    # Rewriter
    "RewriteReport",
    "collect_declarations",
    "rewrite",
    "rewrite_with_report",
    # Preview
    "build_preview_html",
    "list_symbols",
    "symbol_ids",
]
