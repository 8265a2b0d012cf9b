"""
Predicates used to select links sharing the same link-relation type.

A predicate is any ``Link -> bool`` callable. ``LinkPredicate`` wraps such a
callable and adds AND / OR / NOT combinators, so selections read as:

    links.get_link_by("item", having_type("text/html") & having_profile("p"))
"""

from __future__ import annotations

from collections.abc import Callable

from .models.link import Link

LinkSelector = Callable[[Link], bool]


class LinkPredicate:
    """Composable ``Link -> bool`` capability."""

    def __init__(self, test: LinkSelector, description: str | None = None):
        self._test = test
        self._description = description or getattr(test, "__name__", "predicate")

    def __call__(self, link: Link) -> bool:
        return bool(self._test(link))

    def and_(self, other: LinkSelector) -> LinkPredicate:
        return LinkPredicate(
            lambda link: self(link) and bool(other(link)),
            f"({self._description} and {_describe(other)})",
        )

    def or_(self, other: LinkSelector) -> LinkPredicate:
        return LinkPredicate(
            lambda link: self(link) or bool(other(link)),
            f"({self._description} or {_describe(other)})",
        )

    def negate(self) -> LinkPredicate:
        return LinkPredicate(lambda link: not self(link), f"not {self._description}")

    __and__ = and_
    __or__ = or_
    __invert__ = negate

    def __repr__(self) -> str:
        return f"LinkPredicate({self._description})"


def _describe(selector: LinkSelector) -> str:
    if isinstance(selector, LinkPredicate):
        return selector._description
    return getattr(selector, "__name__", repr(selector))


def always_true() -> LinkPredicate:
    return LinkPredicate(lambda link: True, "always_true")


def having_type(type: str) -> LinkPredicate:
    """Select links whose media type equals ``type``."""
    return LinkPredicate(lambda link: link.type == type, f"type={type!r}")


def optionally_having_type(type: str) -> LinkPredicate:
    """Select links whose media type equals ``type`` or is not set."""
    return LinkPredicate(
        lambda link: link.type is None or link.type == type,
        f"type in ({type!r}, None)",
    )


def having_profile(profile: str) -> LinkPredicate:
    return LinkPredicate(lambda link: link.profile == profile, f"profile={profile!r}")


def optionally_having_profile(profile: str) -> LinkPredicate:
    return LinkPredicate(
        lambda link: link.profile is None or link.profile == profile,
        f"profile in ({profile!r}, None)",
    )


def having_name(name: str) -> LinkPredicate:
    return LinkPredicate(lambda link: link.name == name, f"name={name!r}")


def optionally_having_name(name: str) -> LinkPredicate:
    return LinkPredicate(
        lambda link: link.name is None or link.name == name,
        f"name in ({name!r}, None)",
    )


def having_hreflang(hreflang: str) -> LinkPredicate:
    return LinkPredicate(lambda link: link.hreflang == hreflang, f"hreflang={hreflang!r}")


def optionally_having_hreflang(hreflang: str) -> LinkPredicate:
    return LinkPredicate(
        lambda link: link.hreflang is None or link.hreflang == hreflang,
        f"hreflang in ({hreflang!r}, None)",
    )
