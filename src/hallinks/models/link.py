"""
Link value object for the ``_links`` section of HAL documents.

A Link is immutable. Two notions of sameness exist:

- Equality (``==``): every attribute is compared.
- Equivalence (``is_equivalent_to``): only ``rel``, ``href`` and ``name``
  are compared. Builders use equivalence to drop duplicate links.

See draft-kelly-json-hal-08 §5 for the meaning of the optional attributes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field

CURIES_REL = "curies"
SELF_REL = "self"
ITEM_REL = "item"
COLLECTION_REL = "collection"
PROFILE_REL = "profile"


class Link(BaseModel):
    """
    A single hypermedia link.

    Fields:
    - rel: link-relation type, e.g. "self", "item" or "o:product"
    - href: target URI, possibly an RFC 6570 URI template
    - name: secondary key for selecting links sharing the same rel
    - title, type, hreflang, profile, deprecation: optional hints
    """

    model_config = ConfigDict(frozen=True)

    rel: str
    href: str
    name: str | None = None
    title: str | None = None
    type: str | None = None
    hreflang: str | None = None
    profile: str | None = None
    deprecation: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def templated(self) -> bool:
        """True if ``href`` contains a URI template placeholder."""
        return "{" in self.href

    def is_equivalent_to(self, other: Link) -> bool:
        """Compare ``rel``, ``href`` and ``name`` only."""
        return self.rel == other.rel and self.href == other.href and self.name == other.name


class LinkBuilder:
    """Fluent builder producing immutable ``Link`` instances."""

    def __init__(self, rel: str, href: str):
        self._fields: dict[str, str | None] = {"rel": rel, "href": href}

    @classmethod
    def copy_of(cls, prototype: Link) -> LinkBuilder:
        builder = cls(prototype.rel, prototype.href)
        builder._fields.update(
            prototype.model_dump(exclude={"rel", "href", "templated"}, exclude_none=True)
        )
        return builder

    def with_name(self, name: str | None) -> LinkBuilder:
        self._fields["name"] = name
        return self

    def with_title(self, title: str | None) -> LinkBuilder:
        self._fields["title"] = title
        return self

    def with_type(self, type: str | None) -> LinkBuilder:
        self._fields["type"] = type
        return self

    def with_hreflang(self, hreflang: str | None) -> LinkBuilder:
        self._fields["hreflang"] = hreflang
        return self

    def with_profile(self, profile: str | None) -> LinkBuilder:
        self._fields["profile"] = profile
        return self

    def with_deprecation(self, deprecation: str | None) -> LinkBuilder:
        self._fields["deprecation"] = deprecation
        return self

    def build(self) -> Link:
        return Link(**self._fields)


def link_builder(rel: str, href: str) -> LinkBuilder:
    return LinkBuilder(rel, href)


def link(rel: str, href: str) -> Link:
    """Create a link with an arbitrary link-relation type."""
    return Link(rel=rel, href=href)


def self_link(href: str) -> Link:
    """Create a 'self' link pointing to the current resource."""
    return Link(rel=SELF_REL, href=href)


def item(href: str) -> Link:
    return Link(rel=ITEM_REL, href=href)


def collection(href: str) -> Link:
    return Link(rel=COLLECTION_REL, href=href)


def profile(href: str) -> Link:
    return Link(rel=PROFILE_REL, href=href)


def curi(name: str, template: str) -> Link:
    """
    Create a CURI link used to shorten custom link-relation types.

    Args:
        name: the CURI prefix, e.g. "o"
        template: URI template containing a single ``{rel}`` placeholder,
            e.g. "http://spec.example.org/rels/{rel}"
    """
    return Link(rel=CURIES_REL, href=template, name=name)
