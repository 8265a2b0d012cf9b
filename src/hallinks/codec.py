"""Import/export boundary between Links and the ``_links`` JSON object."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import HalFormatError
from .links import Links
from .models.link import Link


class _LinkObject(BaseModel):
    """Wire shape of a single link object. Unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", strict=True)

    href: str
    name: str | None = None
    title: str | None = None
    type: str | None = None
    hreflang: str | None = None
    profile: str | None = None
    deprecation: str | None = None


def link_to_dict(link: Link) -> dict[str, Any]:
    """Render a link object. ``templated`` is only emitted if true."""
    payload = link.model_dump(exclude={"rel", "templated"}, exclude_none=True)
    if link.templated:
        payload["templated"] = True
    return payload


def links_to_dict(links: Links) -> dict[str, Any]:
    """
    Render the ``_links`` object.

    A link-relation type is rendered as an array if it has more than one link
    or is one of the array rels of ``links``; otherwise as a single object.
    """
    payload: dict[str, Any] = {}
    for rel, rel_links in links.items():
        if len(rel_links) > 1 or links.is_array_rel(rel):
            payload[rel] = [link_to_dict(link) for link in rel_links]
        else:
            payload[rel] = link_to_dict(rel_links[0])
    return payload


def links_from_dict(payload: Mapping[str, Any]) -> Links:
    """
    Parse the ``_links`` object of a HAL document.

    CURIs found in "curies" are registered before any other link-relation
    type is resolved, so full URIs are replaced by their curied form.

    Raises:
        HalFormatError: if a value is neither a link object nor a list of
            link objects, or a link object is invalid.
    """
    if not isinstance(payload, Mapping):
        raise HalFormatError(f"_links must be a JSON object, got {type(payload).__name__}")

    links: list[Link] = []
    for rel, value in payload.items():
        links.extend(_as_list_of_links(rel, value))
    return Links(links)


def dumps(links: Links, **kwargs: Any) -> str:
    """Serialize Links to ``_links`` JSON text. ``kwargs`` go to ``json.dumps``."""
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(links_to_dict(links), **kwargs)


def loads(text: str | bytes) -> Links:
    """Parse ``_links`` JSON text."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise HalFormatError(f"Failed to parse _links JSON: {exc}") from exc
    return links_from_dict(payload)


def _as_list_of_links(rel: str, value: Any) -> list[Link]:
    if isinstance(value, Mapping):
        return [_as_link(rel, value)]
    if isinstance(value, list) and all(isinstance(item, Mapping) for item in value):
        return [_as_link(rel, item) for item in value]
    logger.warning(f"Rejecting _links entry rel={rel}: expected link object or list, got {value!r}")
    raise HalFormatError(
        "Document is not in application/hal+json format. "
        f"Expected a single Link or a List of Links: rel={rel} value={value!r}",
        rel=rel,
    )


def _as_link(rel: str, value: Mapping[str, Any]) -> Link:
    try:
        link_object = _LinkObject.model_validate(dict(value))
    except ValidationError as exc:
        logger.warning(f"Rejecting link object rel={rel}: {exc}")
        raise HalFormatError(f"Invalid link object: rel={rel}: {exc}", rel=rel) from exc
    return Link(rel=rel, **link_object.model_dump())
