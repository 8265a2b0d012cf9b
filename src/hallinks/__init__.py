"""
Public API for the hallinks package.
"""

from .codec import dumps, link_to_dict, links_from_dict, links_to_dict, loads
from .errors import HalFormatError, HalLinksError, InvalidRelationError
from .links import EMPTY_LINKS, Links, LinksBuilder, copy_of, empty_links, linking_to, links_builder
from .models import (
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
from .predicates import (
    LinkPredicate,
    always_true,
    having_hreflang,
    having_name,
    having_profile,
    having_type,
    optionally_having_hreflang,
    optionally_having_name,
    optionally_having_profile,
    optionally_having_type,
)
from .rel_registry import (
    DEFAULT_ARRAY_LINK_RELATIONS,
    CuriTemplate,
    RelRegistry,
    default_rel_registry,
    rel_registry,
)

__all__ = [
    "CURIES_REL",
    "DEFAULT_ARRAY_LINK_RELATIONS",
    "EMPTY_LINKS",
    "CuriTemplate",
    "HalFormatError",
    "HalLinksError",
    "InvalidRelationError",
    "Link",
    "LinkBuilder",
    "LinkPredicate",
    "Links",
    "LinksBuilder",
    "RelRegistry",
    "always_true",
    "collection",
    "copy_of",
    "curi",
    "default_rel_registry",
    "dumps",
    "empty_links",
    "having_hreflang",
    "having_name",
    "having_profile",
    "having_type",
    "item",
    "link",
    "link_builder",
    "link_to_dict",
    "linking_to",
    "links_builder",
    "links_from_dict",
    "links_to_dict",
    "loads",
    "optionally_having_hreflang",
    "optionally_having_name",
    "optionally_having_profile",
    "optionally_having_type",
    "profile",
    "rel_registry",
    "self_link",
]
