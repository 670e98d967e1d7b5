"""Plain-text helpers for Kiwix search results and article pages.

No DOM library is involved: hits are found with a linear string scan and
article text is gathered with the stdlib streaming HTMLParser.
"""

from __future__ import annotations

import re
from html.parser import HTMLParser

# Priority order matters: an article link beats a raw resource link even when
# the resource link appears earlier in the page.
HIT_PREFIXES = ("/content/", "/raw/")
MAX_PARAGRAPHS = 4
PARAGRAPH_SEPARATOR = "\n\n"

_WHITESPACE_RE = re.compile(r"\s+")
_SKIPPED_TAGS = {"script", "style", "template", "noscript"}
_P_CLOSING_TAGS = {
    "p", "h1", "h2", "h3", "h4", "h5", "h6", "div", "ul", "ol", "dl", "table",
    "section", "article", "header", "footer", "blockquote", "pre", "hr", "figure",
}


def collapse_whitespace(text: str) -> str:
    """Squash runs of whitespace (newlines included) into single spaces."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def extract_first_hit(html: str) -> str | None:
    """
    Find the article path of the first search hit.

    Each prefix in HIT_PREFIXES is searched across the whole document in
    turn; the first prefix that occurs anywhere wins. The quoted href value
    is returned without its leading slash.

    Args:
        html: Raw search results page

    Returns:
        Path such as "content/wikipedia_en_all/A/Bird", or None
    """
    for prefix in HIT_PREFIXES:
        marker = f'href="{prefix}'
        start = html.find(marker)
        if start == -1:
            continue

        value_start = start + len('href="')
        value_end = html.find('"', value_start)
        if value_end == -1:
            value_end = len(html)

        path = html[value_start:value_end]
        return path[1:] if path.startswith("/") else path

    return None


class _ArticleTextParser(HTMLParser):
    """Collects the first <h1>, the first few <p> elements and all text."""

    def __init__(self, max_paragraphs: int = MAX_PARAGRAPHS):
        super().__init__(convert_charrefs=True)
        self.max_paragraphs = max_paragraphs
        self.heading: str | None = None
        self.paragraphs: list[str] = []
        self.all_text: list[str] = []
        self._capture_tag: str | None = None
        self._capture_depth = 0
        self._buffer: list[str] = []
        self._skip_depth = 0

    def _start_capture(self, tag: str) -> None:
        self._capture_tag = tag
        self._capture_depth = 1
        self._buffer = []

    def _finish_capture(self) -> None:
        text = "".join(self._buffer)
        if self._capture_tag == "h1":
            self.heading = text
        elif self._capture_tag == "p":
            self.paragraphs.append(text)
        self._capture_tag = None
        self._capture_depth = 0
        self._buffer = []

    def _wants(self, tag: str) -> bool:
        if tag == "h1":
            return self.heading is None
        if tag == "p":
            return len(self.paragraphs) < self.max_paragraphs
        return False

    def handle_starttag(self, tag, attrs):
        if tag in _SKIPPED_TAGS:
            self._skip_depth += 1
            return

        if self._capture_tag is not None:
            # block-level tags implicitly close an open <p>
            if self._capture_tag == "p" and tag in _P_CLOSING_TAGS:
                self._finish_capture()
            elif tag == self._capture_tag:
                self._capture_depth += 1
                return
            else:
                return

        if self._wants(tag):
            self._start_capture(tag)

    def handle_endtag(self, tag):
        if tag in _SKIPPED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
            return

        if tag == self._capture_tag:
            self._capture_depth -= 1
            if self._capture_depth <= 0:
                self._finish_capture()

    def handle_data(self, data):
        if self._skip_depth:
            return
        self.all_text.append(data)
        if self._capture_tag is not None:
            self._buffer.append(data)

    def close(self):
        super().close()
        if self._capture_tag is not None:
            self._finish_capture()


def html_to_text(html: str, max_paragraphs: int = MAX_PARAGRAPHS) -> str:
    """
    Reduce an article page to a short plain-text summary.

    The first <h1> becomes the heading line and the first ``max_paragraphs``
    <p> elements the body lines, each whitespace-collapsed and joined with a
    blank line. Without any heading or paragraph text, the collapsed text of
    the whole document is returned instead. May return an empty string.
    """
    parser = _ArticleTextParser(max_paragraphs=max_paragraphs)
    parser.feed(html or "")
    parser.close()

    lines: list[str] = []
    if parser.heading is not None:
        heading = collapse_whitespace(parser.heading)
        if heading:
            lines.append(heading)

    for paragraph in parser.paragraphs:
        paragraph = collapse_whitespace(paragraph)
        if paragraph:
            lines.append(paragraph)

    if lines:
        return PARAGRAPH_SEPARATOR.join(lines)

    return collapse_whitespace("".join(parser.all_text))
