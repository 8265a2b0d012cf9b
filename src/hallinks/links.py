"""
Representation of the ``_links`` of a HAL document.

Links is an ordered multi-map: link-relation type -> one or more Link.
Insertion order is kept for relation types and for links of a relation type,
so "first link" always means "first inserted link".

CURI HANDLING
-------------

Keys are canonical link-relation types. On construction every "curies" link
is registered in a RelRegistry and every relation type is resolved through
it, so ``http://spec.example.org/rels/product`` and ``o:product`` end up
under the same key ``o:product``. Lookups resolve the requested rel the same
way, so callers can use either form.

Links is immutable. Use LinksBuilder to accumulate links incrementally;
``using()`` and ``with_array_rels()`` return new instances.

See draft-kelly-json-hal-08 §4.1.1.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from .logging import logger
from .models.link import CURIES_REL, Link
from .predicates import LinkSelector
from .rel_registry import DEFAULT_ARRAY_LINK_RELATIONS, RelRegistry


class Links:
    """Immutable collection of links, keyed by canonical link-relation type."""

    def __init__(self, links: Iterable[Link] = (), array_rels: Iterable[str] | None = None):
        """
        Create Links from a list of links.

        Args:
            links: links in insertion order
            array_rels: link-relation types always rendered as an array of
                links, even if there is only a single link. Defaults to
                DEFAULT_ARRAY_LINK_RELATIONS.
        """
        grouped: dict[str, list[Link]] = {}
        for link in links:
            grouped.setdefault(link.rel, []).append(link)
        self._init(grouped, array_rels, RelRegistry())

    @classmethod
    def _create(
        cls,
        grouped: Mapping[str, Sequence[Link]],
        array_rels: Iterable[str] | None,
        registry: RelRegistry,
    ) -> Links:
        instance = cls.__new__(cls)
        instance._init(grouped, array_rels, registry)
        return instance

    def _init(
        self,
        grouped: Mapping[str, Sequence[Link]],
        array_rels: Iterable[str] | None,
        registry: RelRegistry,
    ) -> None:
        self._registry = registry
        self._array_rels = frozenset(DEFAULT_ARRAY_LINK_RELATIONS if array_rels is None else array_rels)

        for curi in grouped.get(CURIES_REL, ()):
            registry.register(curi)

        links: dict[str, tuple[Link, ...]] = {}
        for rel, group in grouped.items():
            key = registry.resolve(rel)
            if key != rel:
                logger.debug("Link-relation type %s replaced by CURI %s", rel, key)
            links[key] = links.get(key, ()) + tuple(group)
        self._links = links

    def using(self, registry: RelRegistry) -> Links:
        """
        Return Links with keys resolved against ``registry``.

        All local CURIs are registered in ``registry`` first, so an enclosing
        document can forward them to embedded items.
        """
        return Links._create(self._links, self._array_rels, registry)

    @property
    def registry(self) -> RelRegistry:
        return self._registry

    def get_rels(self) -> list[str]:
        """Return all link-relation types in insertion order."""
        return list(self._links)

    def items(self) -> list[tuple[str, list[Link]]]:
        """
        Return (rel, links) pairs as stored, in insertion order.

        Keys are not resolved again, so the result stays stable when a shared
        registry learns new CURIs after construction.
        """
        return [(rel, list(links)) for rel, links in self._links.items()]

    def get_array_rels(self) -> frozenset[str]:
        """
        Return the configured link-relation types rendered as arrays.

        Relation types that merely contain more than one link are not part of
        this set.
        """
        return self._array_rels

    def with_array_rels(self, *array_rels: str | Iterable[str]) -> Links:
        """Return a copy of these Links using a different array-rel policy."""
        copy = Links.__new__(Links)
        copy._registry = self._registry
        copy._links = dict(self._links)
        copy._array_rels = frozenset(_flatten_rels(array_rels))
        return copy

    def is_array_rel(self, rel: str) -> bool:
        """True if ``rel`` is configured to be rendered as an array."""
        if rel in self._array_rels:
            return True
        resolved = self._registry.resolve(rel)
        return any(self._registry.resolve(array_rel) == resolved for array_rel in self._array_rels)

    def get_link_by(self, rel: str, selector: LinkSelector | None = None) -> Link | None:
        """
        Return the first link having the link-relation type ``rel``.

        ``rel`` may be a full URI or its curied form. ``selector`` picks one
        of possibly several links of the same relation type; see
        ``hallinks.predicates`` for typical selections.
        """
        links = self.get_links_by(rel, selector)
        return links[0] if links else None

    def get_links_by(self, rel: str, selector: LinkSelector | None = None) -> list[Link]:
        """Return all links having the link-relation type ``rel``, or []."""
        links = self._links.get(self._registry.resolve(rel), ())
        if selector is None:
            return list(links)
        return [link for link in links if selector(link)]

    def is_empty(self) -> bool:
        return not self._links

    def __iter__(self) -> Iterator[Link]:
        for links in self._links.values():
            yield from links

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Links):
            return NotImplemented
        return self._links == other._links

    def __hash__(self) -> int:
        return hash(frozenset(self._links.items()))

    def __repr__(self) -> str:
        return f"Links(links={self._links!r})"


class LinksBuilder:
    """
    Mutable builder for Links.

    Equivalent links (same rel, href and name) are not added twice; the
    duplicate is silently skipped.
    """

    def __init__(self):
        self._links: dict[str, list[Link]] = {}
        self._array_rels: frozenset[str] | None = None
        self._registry: RelRegistry | None = None

    def with_link(self, link: Link, *more: Link) -> LinksBuilder:
        return self.with_links([link, *more])

    def with_links(self, links: Iterable[Link] | Links) -> LinksBuilder:
        """
        Add links from a list or another Links instance.

        The array rels of another Links instance are not copied.
        """
        for link in links:
            links_per_rel = self._links.setdefault(link.rel, [])
            if any(existing.is_equivalent_to(link) for existing in links_per_rel):
                logger.debug("Skipping equivalent link rel=%s href=%s", link.rel, link.href)
                continue
            links_per_rel.append(link)
        return self

    def with_array_rels(self, *array_rels: str | Iterable[str]) -> LinksBuilder:
        self._array_rels = frozenset(_flatten_rels(array_rels))
        return self

    def using(self, registry: RelRegistry) -> LinksBuilder:
        self._registry = registry
        return self

    def build(self) -> Links:
        registry = self._registry if self._registry is not None else RelRegistry()
        return Links._create(self._links, self._array_rels, registry)


def _flatten_rels(array_rels: tuple[str | Iterable[str], ...]) -> list[str]:
    rels: list[str] = []
    for value in array_rels:
        if isinstance(value, str):
            rels.append(value)
        else:
            rels.extend(value)
    return rels


EMPTY_LINKS = Links()


def empty_links() -> Links:
    return EMPTY_LINKS


def linking_to(link: Link | Iterable[Link], *more: Link) -> Links:
    """Create Links from one or more links, or from a single list of links."""
    if isinstance(link, Link):
        return Links([link, *more])
    return Links([*link, *more])


def links_builder() -> LinksBuilder:
    return LinksBuilder()


def copy_of(prototype: Links) -> LinksBuilder:
    """Return a builder initialized with the links and array rels of ``prototype``."""
    return LinksBuilder().with_links(prototype).with_array_rels(prototype.get_array_rels())
