"""HTML rendering for blog pages.

Serializes head descriptors into head markup and wraps fetched blog content
in a document shell. Title text and attribute values are escaped; body
content and script bodies are trusted upstream HTML and inserted as-is.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Protocol

from dropinblog.core.head import HeadDescriptor

HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}
_ESCAPE_PATTERN = re.compile(r"[&<>\"']")

HEAD_TAG_SEPARATOR = "\n    "


def escape_html(value: str) -> str:
    return _ESCAPE_PATTERN.sub(lambda m: HTML_ESCAPES[m.group(0)], value)


def render_attributes(attributes: Mapping[str, object] | None) -> str:
    """Serialize attributes as space-joined key="value" pairs.

    Values are escaped, names are emitted verbatim.
    """
    if not attributes:
        return ""
    return " ".join(f'{key}="{escape_html(str(value))}"' for key, value in attributes.items())


def render_head_tag(descriptor: HeadDescriptor) -> str:
    if descriptor.tag == "title":
        return f"<title>{escape_html(descriptor.content or '')}</title>"

    attrs = render_attributes(descriptor.attributes)
    open_tag = f"<{descriptor.tag} {attrs}>" if attrs else f"<{descriptor.tag}>"

    if descriptor.tag in ("meta", "link"):
        return open_tag

    content = descriptor.content or ""
    if descriptor.tag == "script" or content:
        return f"{open_tag}{content}</{descriptor.tag}>"
    return open_tag


def render_head_tags(descriptors: Sequence[HeadDescriptor]) -> str:
    return HEAD_TAG_SEPARATOR.join(render_head_tag(d) for d in descriptors)


def render_default_document(content: str, head_descriptors: Sequence[HeadDescriptor]) -> str:
    """Render the minimal document shell around blog content."""
    head_tags = render_head_tags(head_descriptors)
    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    {head_tags}
  </head>
  <body>
    <div id="dropinblog-content">{content}</div>
  </body>
</html>"""


def render_html_template(
    content: str,
    *,
    title: str = "Blog",
    head_tags: str = "",
    body_attributes: Mapping[str, str] | None = None,
    additional_head_content: str = "",
    additional_body_content: str = "",
) -> str:
    """Render a configurable document around blog content.

    For hosts that need their own title, extra head/body markup or body
    attributes without writing a full renderer.

    Args:
        content: Body HTML (inserted as-is)
        title: Document title (escaped)
        head_tags: Pre-rendered head markup, e.g. from render_head_tags()
        body_attributes: Attributes for the body element (values escaped)
        additional_head_content: Raw markup appended to the head
        additional_body_content: Raw markup appended to the body

    Returns:
        Complete HTML document
    """
    body_attrs = render_attributes(body_attributes)
    body_open = f"<body {body_attrs}>" if body_attrs else "<body>"
    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{escape_html(title)}</title>
    {head_tags}{additional_head_content}
  </head>
  {body_open}
    {content}{additional_body_content}
  </body>
</html>"""


class RenderHtml(Protocol):
    """Host-supplied document renderer, called with keyword arguments only."""

    def __call__(
        self,
        *,
        content: str,
        head_descriptors: list[HeadDescriptor],
        pathname: str,
    ) -> str: ...


class DocumentRenderer(Protocol):
    """Produces the HTML document for a resolved blog page."""

    def render(
        self,
        content: str,
        head_descriptors: list[HeadDescriptor],
        pathname: str,
    ) -> str: ...


class DefaultDocumentRenderer:
    """Built-in minimal document shell."""

    def render(
        self,
        content: str,
        head_descriptors: list[HeadDescriptor],
        pathname: str,
    ) -> str:
        return render_default_document(content, head_descriptors)


class CallableDocumentRenderer:
    """Delegates document rendering to a host-supplied function."""

    def __init__(self, render_html: RenderHtml) -> None:
        self._render_html = render_html

    def render(
        self,
        content: str,
        head_descriptors: list[HeadDescriptor],
        pathname: str,
    ) -> str:
        return self._render_html(
            content=content,
            head_descriptors=head_descriptors,
            pathname=pathname,
        )


def select_document_renderer(render_html: RenderHtml | None) -> DocumentRenderer:
    if render_html is not None:
        return CallableDocumentRenderer(render_html)
    return DefaultDocumentRenderer()
