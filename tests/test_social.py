import pytest

from gqlcore.social import USERS, Page, SocialResolver, User


@pytest.fixture
def resolver():
    return SocialResolver()


def names(users):
    return [u.name() for u in users]


def test_admin_found(resolver):
    admin = resolver.admin("0x01")
    assert admin.name() == "Albus Dumbledore"
    assert admin.role() == "ADMIN"
    assert admin.id() == "0x01"


def test_admin_wrong_role(resolver):
    with pytest.raises(LookupError, match="user with id=0x02 and role=ADMIN does not exist"):
        resolver.admin("0x02")


def test_admin_explicit_role(resolver):
    assert resolver.admin("0x02", "USER").name() == "Harry Potter"


def test_user_found(resolver):
    usr = resolver.user("0x03")
    assert usr.name() == "Hermione Granger"
    assert usr.email == "[email]"


def test_user_missing(resolver):
    with pytest.raises(LookupError, match="user with id=0x09 does not exist"):
        resolver.user("0x09")


def test_search(resolver):
    assert names(resolver.search("Potter")) == ["Harry Potter"]
    assert resolver.search("nobody-has-this") == []
    assert len(resolver.search("")) == len(USERS)


def test_friends_no_page(resolver):
    harry = resolver.user("0x02")
    assert names(harry.friends_resolver()) == [
        "Albus Dumbledore", "Hermione Granger", "Ronald Weasley"]


def test_friends_first(resolver):
    harry = resolver.user("0x02")
    assert names(harry.friends_resolver(Page(first=1))) == [
        "Hermione Granger", "Ronald Weasley"]


def test_friends_first_and_last(resolver):
    harry = resolver.user("0x02")
    assert names(harry.friends_resolver(Page(first=1, last=2))) == ["Hermione Granger"]


def test_friends_last_zero_means_all(resolver):
    harry = resolver.user("0x02")
    assert harry.friends_resolver(Page(last=0)) == harry.friends


def test_friends_last_too_large_means_all(resolver):
    ron = resolver.user("0x04")
    assert ron.friends_resolver(Page(last=50)) == ron.friends


def test_friends_first_too_large(resolver):
    albus = resolver.user("0x01")
    with pytest.raises(ValueError, match="not enough users"):
        albus.friends_resolver(Page(first=5))


def test_friends_inverted_bounds():
    usr = User("x", "X", "USER", friends=list(USERS))
    with pytest.raises(IndexError):
        usr.friends_resolver(Page(first=3, last=1))


def test_friendship_is_mutual(resolver):
    for usr in resolver.search(""):
        for friend in usr.friends_resolver():
            assert usr.id() in [f.id() for f in friend.friends_resolver()]