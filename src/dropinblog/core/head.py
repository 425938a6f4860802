"""Head metadata descriptors.

Turns the structured head data returned by the DropInBlog API into an ordered
list of tag descriptors that renderers serialize into HTML head markup.
"""

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from dropinblog.core.types import HeadItemDict

# head_data key -> meta attribute name/value pairs emitted for it
_META_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("description", "name", "description"),
    ("keywords", "name", "keywords"),
    ("robots", "name", "robots"),
    ("og_type", "property", "og:type"),
    ("og_title", "property", "og:title"),
    ("og_description", "property", "og:description"),
    ("og_image", "property", "og:image"),
    ("og_url", "property", "og:url"),
    ("og_site_name", "property", "og:site_name"),
    ("twitter_card", "name", "twitter:card"),
    ("twitter_title", "name", "twitter:title"),
    ("twitter_description", "name", "twitter:description"),
    ("twitter_image", "name", "twitter:image"),
)


@dataclass(frozen=True)
class HeadDescriptor:
    """A single element destined for the document head."""

    tag: str
    content: str | None = None
    attributes: dict[str, str] | None = None


def build_head_descriptors(
    head_data: Mapping[str, Any] | None,
    head_items: Iterable[HeadItemDict] | None,
) -> list[HeadDescriptor]:
    """Build ordered head descriptors from API head data and raw head items.

    Structured head_data comes first (title, meta fields, canonical link,
    JSON-LD schema), followed by head_items in their original order.
    Items without a tag name are skipped.

    Args:
        head_data: Structured SEO metadata (title, description, og_* fields, ...)
        head_items: Additional raw head elements

    Returns:
        Descriptors in rendering order
    """
    descriptors: list[HeadDescriptor] = []

    if head_data:
        title = head_data.get("title")
        if title:
            descriptors.append(HeadDescriptor(tag="title", content=str(title)))

        for key, attr_name, attr_value in _META_FIELDS:
            value = head_data.get(key)
            if value:
                descriptors.append(
                    HeadDescriptor(
                        tag="meta",
                        attributes={attr_name: attr_value, "content": str(value)},
                    )
                )

        canonical_url = head_data.get("canonical_url")
        if canonical_url:
            descriptors.append(
                HeadDescriptor(
                    tag="link",
                    attributes={"rel": "canonical", "href": str(canonical_url)},
                )
            )

        schema = head_data.get("schema")
        if schema:
            descriptors.append(
                HeadDescriptor(
                    tag="script",
                    content=schema if isinstance(schema, str) else json.dumps(schema),
                    attributes={"type": "application/ld+json"},
                )
            )

    for item in head_items or ():
        tag = item.get("tag")
        if not tag:
            continue
        attributes = item.get("attributes")
        descriptors.append(
            HeadDescriptor(
                tag=str(tag).lower(),
                content=item.get("content"),
                attributes={str(k): str(v) for k, v in attributes.items() if v is not None}
                if attributes
                else None,
            )
        )

    return descriptors
