"""
HTML document utilities

Parses fetched pages into lxml element trees and provides the handful of
queries both schedule pipelines need: by class, by tag, and parent/child pairs.
"""
from collections.abc import Iterator
from dataclasses import dataclass
import logging

from lxml import etree  # type: ignore
from lxml import html  # type: ignore


logger = logging.getLogger(__name__)

_CLASS_XPATH = "descendant::*[contains(concat(' ', normalize-space(@class), ' '), concat(' ', $name, ' '))]"


def parse_document(content: bytes | str, encoding: str = "utf-8") -> html.HtmlElement:
    """
    Parse raw page content into an HTML element tree

    lxml recovers from malformed markup. An empty page parses to an empty
    document rather than an error, so the pipelines report what is missing
    from it instead.

    Args:
        content: Raw page bytes or already decoded text
        encoding: Encoding used to decode ``bytes`` content

    Returns:
        Root ``<html>`` element
    """
    parser = html.HTMLParser(encoding=encoding) if isinstance(content, bytes) else None
    try:
        root = html.document_fromstring(content, parser=parser)
    except (etree.ParserError, etree.XMLSyntaxError):
        logger.warning("  Received an empty HTML document")
        return html.document_fromstring("<html><body></body></html>")
    logger.debug(f"  HTML document loaded (root tag: {root.tag})")
    return root


def has_class(element: html.HtmlElement, class_name: str) -> bool:
    """Check whether an element carries a class token"""
    return class_name in (element.get("class") or "").split()


def find_by_class(element: html.HtmlElement, class_name: str) -> list[html.HtmlElement]:
    """All descendants carrying the class, in document order"""
    return element.xpath(_CLASS_XPATH, name=class_name)


def find_children(element: html.HtmlElement, tag: str) -> list[html.HtmlElement]:
    """Direct children with the given tag name"""
    return [child for child in element if isinstance(child.tag, str) and child.tag == tag]


def find_first_body_script(document: html.HtmlElement) -> html.HtmlElement | None:
    """First ``<script>`` that is a direct child of ``<body>``, if any"""
    for body in document.iter("body"):
        scripts = find_children(body, "script")
        if scripts:
            return scripts[0]
    return None


def text_of(element: html.HtmlElement) -> str:
    """Concatenated text of an element and all its descendants"""
    return element.text_content()


@dataclass(frozen=True, slots=True)
class ChildSelector:
    """
    Match elements that are direct children of a class-bearing parent.

    Candidates are the descendants of the element the selector is applied to,
    in document order; their parent may be that element itself.
    The child is matched by tag name, by class, or both.
    """
    parent_class: str
    child_tag: str | None = None
    child_class: str | None = None

    def select(self, element: html.HtmlElement) -> Iterator[html.HtmlElement]:
        for node in element.iterdescendants():
            if not isinstance(node.tag, str):
                continue
            if self.child_tag is not None and node.tag != self.child_tag:
                continue
            if self.child_class is not None and not has_class(node, self.child_class):
                continue
            if has_class(node.getparent(), self.parent_class):
                yield node

    def first(self, element: html.HtmlElement) -> html.HtmlElement | None:
        return next(self.select(element), None)


def first_text(element: html.HtmlElement, selectors: list[ChildSelector]) -> str | None:
    """
    Trimmed text of the first match, trying selectors in order

    Args:
        element: Element to search below
        selectors: Selector strategies, most specific first

    Returns:
        Text of the first selector that matches anything, or None if none do
    """
    for selector in selectors:
        node = selector.first(element)
        if node is not None:
            return text_of(node).strip()
    return None


def all_texts(element: html.HtmlElement, selector: ChildSelector) -> list[str]:
    """Trimmed text of every match, in document order"""
    return [text_of(node).strip() for node in selector.select(element)]


__all__ = [
    "ChildSelector",
    "all_texts",
    "find_by_class",
    "find_children",
    "find_first_body_script",
    "first_text",
    "has_class",
    "parse_document",
    "text_of",
]
