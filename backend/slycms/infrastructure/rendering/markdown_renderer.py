"""Markdown → HTML conversion backed by markdown-it-py."""

from markdown_it import MarkdownIt

from slycms.application.interfaces import MarkdownRenderer


class MarkdownItRenderer(MarkdownRenderer):
    """Renders CommonMark documents to HTML fragments; raw HTML passes through."""

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark", {"html": True})

    def render(self, markup: str) -> str:
        return self._md.render(markup)
