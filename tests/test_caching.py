from datetime import timedelta

from gqlcore.cache import Hint, Scope, hintable
from gqlcore.caching import CachingResolver, UserProfile


def test_hello_greets_and_hints_public_hour():
    with hintable() as collector:
        result = CachingResolver().hello("Gopher")
    assert result == "Hello Gopher!"
    assert collector.resolve() == Hint(timedelta(hours=1), Scope.PUBLIC)


def test_me_returns_world_profile_and_private_hint():
    with hintable() as collector:
        profile = CachingResolver().me()
    assert profile.name() == "World"
    assert collector.resolve() == Hint(timedelta(minutes=1), Scope.PRIVATE)


def test_combined_request_hint():
    resolver = CachingResolver()
    with hintable() as collector:
        resolver.hello("World")
        resolver.me()
    assert str(collector.resolve()) == "private, max-age=60"


def test_resolvers_work_without_hint_context():
    assert CachingResolver().hello("World") == "Hello World!"


def test_user_profile_name():
    assert UserProfile("Ada").name() == "Ada"


def test_hello_only_hint_header():
    with hintable() as collector:
        CachingResolver().hello("World")
    assert str(collector.resolve()) == "public, max-age=3600"