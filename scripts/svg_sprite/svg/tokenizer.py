"""Lightweight markup tokenizer for SVG text surgery.

Splits markup into tags and the text between them without building a tree,
so callers can rewrite individual tags while every untouched byte of the
input is reproduced exactly.
"""

import re
from typing import Iterator, NamedTuple

# Token kinds
TEXT = "text"
COMMENT = "comment"
CDATA = "cdata"
PROCESSING = "processing"
DECLARATION = "declaration"
START = "start"
END = "end"

# Names and values exclude "<", so a tag that never closes stops matching at
# the next "<". Unterminated comments, CDATA and processing instructions run
# to the end of input.
TOKEN_PATTERN = re.compile(
    r"(?P<comment><!--.*?(?:-->|\Z))"
    r"|(?P<cdata><!\[CDATA\[.*?(?:\]\]>|\Z))"
    r"|(?P<processing><\?.*?(?:\?>|\Z))"
    r"|(?P<declaration><![^<>]*>)"
    r"|(?P<end></[A-Za-z_][^\s<>]*\s*>)"
    r"|(?P<start><[A-Za-z_][^\s/<>]*"
    r"""(?:\s+[^\s=/<>]+(?:\s*=\s*(?:"[^"<]*"|'[^'<]*'|[^\s"'<>]+))?)*"""
    r"\s*/?>)",
    re.DOTALL,
)

TAG_NAME_PATTERN = re.compile(r"</?([^\s/<>]+)")

ATTR_PATTERN = re.compile(
    r"(\s+)([^\s=/<>]+)"
    r"""(?:(\s*=\s*)(?:"([^"<]*)"|'([^'<]*)'|([^\s"'<>]+)))?"""
)


class Token(NamedTuple):
    """A slice of markup: a tag of some kind, or the text between tags."""

    kind: str
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def name(self) -> str:
        """Local tag name for start/end tokens, empty otherwise."""
        if self.kind not in (START, END):
            return ""
        match = TAG_NAME_PATTERN.match(self.text)
        return match.group(1) if match else ""

    @property
    def self_closing(self) -> bool:
        return self.kind == START and self.text.rstrip(">").rstrip().endswith("/")


class Attribute:
    """One attribute of a start tag, keeping its original spelling."""

    def __init__(
        self,
        space: str,
        name: str,
        equals: str = "",
        quote: str = "",
        value: str | None = None,
    ):
        self.space = space
        self.name = name
        self.equals = equals
        self.quote = quote
        self.value = value

    def render(self) -> str:
        if self.value is None:
            return self.space + self.name
        return f"{self.space}{self.name}{self.equals}{self.quote}{self.value}{self.quote}"

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.value!r})"


class Tag:
    """A parsed start (or empty-element) tag.

    Attributes:
        name: Tag name as written, including any namespace prefix
        attributes: Attributes in document order
        tail: Everything after the last attribute (whitespace, "/" and ">")
    """

    def __init__(self, name: str, attributes: list[Attribute], tail: str):
        self.name = name
        self.attributes = attributes
        self.tail = tail

    def get(self, name: str) -> Attribute | None:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def remove(self, attr: Attribute) -> None:
        self.attributes.remove(attr)

    def render(self) -> str:
        return "<" + self.name + "".join(a.render() for a in self.attributes) + self.tail


def tokenize(markup: str) -> Iterator[Token]:
    """Split markup into tokens covering the whole input.

    Concatenating the text of every yielded token reproduces ``markup``
    exactly. A stray ``<`` that does not start a recognisable tag stays
    inside a text token.

    Args:
        markup: SVG (or any XML-ish) markup

    Yields:
        Token instances in document order
    """
    pos = 0
    for match in TOKEN_PATTERN.finditer(markup):
        if match.start() > pos:
            yield Token(TEXT, markup[pos:match.start()], pos)
        yield Token(match.lastgroup, match.group(0), match.start())
        pos = match.end()
    if pos < len(markup):
        yield Token(TEXT, markup[pos:], pos)


def parse_tag(text: str) -> Tag:
    """Parse the text of a start tag into name, attributes and tail.

    Args:
        text: Start tag text such as ``<path id="a" d="M0 0"/>``

    Returns:
        Tag whose ``render()`` reproduces ``text`` byte-for-byte
    """
    name_match = TAG_NAME_PATTERN.match(text)
    if name_match is None:
        return Tag("", [], text)

    attributes = []
    pos = name_match.end()
    while True:
        match = ATTR_PATTERN.match(text, pos)
        if match is None:
            break
        space, name, equals, dq, sq, bare = match.groups()
        if equals is None:
            attributes.append(Attribute(space, name))
        elif dq is not None:
            attributes.append(Attribute(space, name, equals, '"', dq))
        elif sq is not None:
            attributes.append(Attribute(space, name, equals, "'", sq))
        else:
            attributes.append(Attribute(space, name, equals, "", bare))
        pos = match.end()

    return Tag(name_match.group(1), attributes, text[pos:])
