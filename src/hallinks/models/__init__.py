from .link import (
    CURIES_REL,
    Link,
    LinkBuilder,
    collection,
    curi,
    item,
    link,
    link_builder,
    profile,
    self_link,
)

__all__ = [
    "CURIES_REL",
    "Link",
    "LinkBuilder",
    "collection",
    "curi",
    "item",
    "link",
    "link_builder",
    "profile",
    "self_link",
]
