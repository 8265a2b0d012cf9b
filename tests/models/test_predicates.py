from hallinks.models.link import link, link_builder
from hallinks.predicates import (
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


def _link(**attrs):
    builder = link_builder("item", "http://example.org/items/42")
    for attr, value in attrs.items():
        getattr(builder, f"with_{attr}")(value)
    return builder.build()


def test_having_predicates_require_value():
    assert having_type("text/html")(_link(type="text/html"))
    assert not having_type("text/html")(_link())
    assert having_profile("p")(_link(profile="p"))
    assert having_name("Foo")(_link(name="Foo"))
    assert not having_name("Foo")(_link(name="Bar"))
    assert having_hreflang("de")(_link(hreflang="de"))


def test_optionally_having_predicates_accept_unset_attribute():
    assert optionally_having_type("text/html")(_link())
    assert not optionally_having_type("text/html")(_link(type="text/plain"))
    assert optionally_having_profile("p")(_link())
    assert optionally_having_name("Foo")(_link(name="Foo"))
    assert not optionally_having_name("Foo")(_link(name="Bar"))
    assert optionally_having_hreflang("de")(_link())


def test_and_or_negate():
    html_with_profile = having_type("text/html") & having_profile("p")
    assert html_with_profile(_link(type="text/html", profile="p"))
    assert not html_with_profile(_link(type="text/html"))

    html_or_named = having_type("text/html").or_(having_name("Foo"))
    assert html_or_named(_link(name="Foo"))
    assert not html_or_named(_link(name="Bar"))

    assert (~having_name("Foo"))(_link(name="Bar"))
    assert not having_name("Foo").negate()(_link(name="Foo"))


def test_combines_with_plain_callables():
    predicate = having_type("text/html").and_(lambda l: l.href.endswith("/42"))
    assert predicate(_link(type="text/html"))
    assert "and" in repr(predicate)


def test_wraps_plain_callable():
    predicate = LinkPredicate(lambda l: l.rel == "foo")
    assert predicate(link("foo", "http://example.org/foo"))
    assert always_true()(link("bar", "http://example.org/bar"))
