"""
Registry of link-relation types and CURIs.

CURIs shorten custom link-relation types: given the CURI link
``{"name": "o", "href": "http://spec.example.org/rels/{rel}"}`` the full
link-relation type ``http://spec.example.org/rels/product`` is written as
``o:product`` in ``_links``.

RESOLUTION RULES
----------------

- resolve(): full URI -> curied form, using the first registered template
  whose literal prefix and suffix surround the URI.
- expand(): curied form -> full URI, using the template of the CURI prefix.
- Identifiers that cannot be resolved or expanded pass through unchanged.
  Most link-relation types ("self", "item") are never curied, so this is the
  normal case and never an error.

The registry is mutable. A document builds one registry and hands it down to
nested ``Links`` via ``Links.using(registry)``; there is no global registry.

See draft-kelly-json-hal-08 §8.2 for CURIs.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import InvalidRelationError
from .logging import logger
from .models.link import CURIES_REL, Link

if TYPE_CHECKING:
    from .links import Links

REL_PLACEHOLDER = "{rel}"

DEFAULT_ARRAY_LINK_RELATIONS: frozenset[str] = frozenset({CURIES_REL, "item", "items"})


@dataclass(frozen=True)
class CuriTemplate:
    """
    A CURI name bound to a URI template with exactly one ``{rel}`` placeholder.
    """

    name: str
    template: str

    def __post_init__(self):
        """Validate name and placeholder count."""
        if not self.name:
            raise InvalidRelationError("CURI name must not be empty")
        count = self.template.count(REL_PLACEHOLDER)
        if count != 1:
            raise InvalidRelationError(
                f"CURI template must contain exactly one {REL_PLACEHOLDER} placeholder, "
                f"got {count}: name={self.name} template={self.template}"
            )

    @classmethod
    def from_link(cls, link: Link) -> CuriTemplate:
        if link.rel != CURIES_REL:
            raise InvalidRelationError(f"Link must be a CURI (rel={CURIES_REL}), got rel={link.rel}")
        if link.name is None:
            raise InvalidRelationError(f"CURI link has no name: href={link.href}")
        return cls(name=link.name, template=link.href)

    @property
    def prefix(self) -> str:
        return self.template.split(REL_PLACEHOLDER, 1)[0]

    @property
    def suffix(self) -> str:
        return self.template.split(REL_PLACEHOLDER, 1)[1]

    def matches(self, rel: str) -> bool:
        """True if ``rel`` is a full URI produced by this template."""
        prefix, suffix = self.prefix, self.suffix
        return (
            len(rel) >= len(prefix) + len(suffix)
            and rel.startswith(prefix)
            and rel.endswith(suffix)
        )

    def curied_rel_from(self, rel: str) -> str:
        captured = rel[len(self.prefix):len(rel) - len(self.suffix)]
        return f"{self.name}:{captured}"

    def expanded_rel_from(self, curied_rel: str) -> str:
        return self.template.replace(REL_PLACEHOLDER, curied_rel[len(self.name) + 1:])


class RelRegistry:
    """
    CURI templates plus the set of link-relation types rendered as arrays.

    Array rels only cover the configured policy. A link-relation type with
    more than one link is rendered as an array regardless; that is decided at
    serialization time, not here.
    """

    def __init__(self, array_rels: Iterable[str] | None = None):
        self._curies: dict[str, CuriTemplate] = {}
        if array_rels is None:
            self._array_rels: set[str] = set(DEFAULT_ARRAY_LINK_RELATIONS)
        else:
            self._array_rels = set(array_rels) | {CURIES_REL}

    def register(self, curi: Link) -> None:
        """
        Register a CURI link.

        Raises:
            InvalidRelationError: if ``curi.rel`` is not "curies" or the
                template is malformed. The registry is left unchanged.
        """
        template = CuriTemplate.from_link(curi)
        if template.name in self._curies and self._curies[template.name] != template:
            logger.debug(
                "Replacing CURI %s: %s -> %s",
                template.name,
                self._curies[template.name].template,
                template.template,
            )
        self._curies[template.name] = template
        self._array_rels.add(template.name)
        logger.debug("Registered CURI %s=%s", template.name, template.template)

    def resolve(self, rel: str) -> str:
        """
        Return the canonical (curied, if possible) form of ``rel``.

        Already curied rels with a known prefix are returned as-is. Full URIs
        are matched against the templates in registration order.
        """
        if self._curie_of(rel) is not None:
            return rel
        for template in self._curies.values():
            if template.matches(rel):
                return template.curied_rel_from(rel)
        return rel

    def expand(self, rel: str) -> str:
        """Return the full URI of a curied ``rel``, or ``rel`` itself."""
        template = self._curie_of(rel)
        if template is None:
            return rel
        return template.expanded_rel_from(rel)

    def is_array_rel(self, rel: str) -> bool:
        return rel in self._array_rels or self.resolve(rel) in self._array_rels

    def get_array_rels(self) -> frozenset[str]:
        return frozenset(self._array_rels)

    def get_curies(self) -> list[CuriTemplate]:
        return list(self._curies.values())

    def merge_with(self, other: RelRegistry) -> RelRegistry:
        """
        Return a new registry containing the CURIs and array rels of both.

        On CURI name collisions the template of ``other`` wins. Neither
        registry is modified.
        """
        merged = RelRegistry(array_rels=self._array_rels | other._array_rels)
        merged._curies = {**self._curies, **other._curies}
        return merged

    def _curie_of(self, rel: str) -> CuriTemplate | None:
        if ":" not in rel:
            return None
        return self._curies.get(rel.split(":", 1)[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RelRegistry):
            return NotImplemented
        return self._curies == other._curies and self._array_rels == other._array_rels

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        curies = ", ".join(f"{t.name}={t.template}" for t in self._curies.values())
        return f"RelRegistry(curies=[{curies}], array_rels={sorted(self._array_rels)})"


def default_rel_registry() -> RelRegistry:
    """Empty registry with the default array rels."""
    return RelRegistry()


def rel_registry(
    links: Links | Iterable[Link] | Iterable[str] | None = None,
    array_rels: Iterable[str] | None = None,
) -> RelRegistry:
    """
    Create a registry pre-seeded with CURIs and/or array rels.

    ``links`` may be a ``Links`` collection or an iterable of links whose
    "curies" links are registered. Passing an iterable of strings as the only
    argument is shorthand for ``array_rels``. Explicit array rels replace the
    defaults; "curies" is always kept.
    """
    # Local import: links.py depends on this module.
    from .links import Links

    curies: list[Link] = []
    if isinstance(links, Links):
        curies = links.get_links_by(CURIES_REL)
    elif links is not None:
        values = list(links)
        if values and all(isinstance(value, str) for value in values):
            if array_rels is not None:
                raise TypeError("array_rels passed twice")
            array_rels = values  # type: ignore[assignment]
        else:
            curies = [value for value in values if isinstance(value, Link) and value.rel == CURIES_REL]

    registry = RelRegistry(array_rels=array_rels)
    for curi in curies:
        registry.register(curi)
    return registry
