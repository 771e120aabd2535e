from datetime import timedelta

import pytest

from gqlcore.cache import Hint, HintCollector, Scope, add_hint, hintable


def test_str_public_hour():
    assert str(Hint(timedelta(hours=1), Scope.PUBLIC)) == "public, max-age=3600"


def test_str_private():
    assert str(Hint(timedelta(seconds=30), Scope.PRIVATE)).startswith("private, ")


def test_str_without_age_raises():
    with pytest.raises(ValueError):
        str(Hint())


def test_resolve_empty_is_no_cache_public():
    assert HintCollector().resolve() == Hint(timedelta(0), Scope.PUBLIC)


def test_resolve_takes_shortest_age_and_private_scope():
    collector = HintCollector()
    collector.add(Hint(timedelta(hours=1), Scope.PUBLIC))
    collector.add(Hint(timedelta(minutes=1), Scope.PRIVATE))
    collector.add(Hint(None, Scope.PUBLIC))
    assert collector.resolve() == Hint(timedelta(minutes=1), Scope.PRIVATE)


def test_resolve_ignores_missing_ages():
    collector = HintCollector()
    collector.add(Hint(None, Scope.PUBLIC))
    collector.add(Hint(timedelta(seconds=5), Scope.PUBLIC))
    assert collector.resolve().max_age == timedelta(seconds=5)


def test_add_hint_within_hintable():
    with hintable() as collector:
        add_hint(Hint(timedelta(seconds=10), Scope.PUBLIC))
    assert collector.resolve() == Hint(timedelta(seconds=10), Scope.PUBLIC)


def test_add_hint_outside_hintable_is_ignored():
    with hintable() as collector:
        pass
    add_hint(Hint(timedelta(seconds=10), Scope.PRIVATE))
    assert collector.resolve() == Hint(timedelta(0), Scope.PUBLIC)


def test_nested_hintable_restores_outer():
    with hintable() as outer:
        with hintable() as inner:
            add_hint(Hint(timedelta(seconds=1), Scope.PRIVATE))
        add_hint(Hint(timedelta(seconds=2), Scope.PUBLIC))
    assert inner.resolve() == Hint(timedelta(seconds=1), Scope.PRIVATE)
    assert outer.resolve() == Hint(timedelta(seconds=2), Scope.PUBLIC)