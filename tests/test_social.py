import pytest

from gqlkit.examples.social import (
    AdminResolver,
    Page,
    Resolver,
    SearchResult,
    UserNotFoundError,
)


@pytest.fixture
def resolver():
    return Resolver()


def test_user_lookup(resolver):
    user = resolver.user("0x01")
    assert user.name() == "Albus Dumbledore"
    assert user.id() == "0x01"
    assert user.role() == "ADMIN"
    assert user.email == "[email]"


def test_unknown_user_raises(resolver):
    with pytest.raises(UserNotFoundError, match="user with id=0x99 does not exist"):
        resolver.user("0x99")


def test_admin_with_default_role(resolver):
    admin = resolver.admin("0x01")
    assert admin.role() == "ADMIN"
    assert admin.to_user() is resolver.user("0x01")


def test_admin_role_mismatch_raises(resolver):
    with pytest.raises(UserNotFoundError, match="id=0x02 and role=ADMIN"):
        resolver.admin("0x02")


def test_admin_with_explicit_role(resolver):
    admin = resolver.admin("0x02", role="USER")
    assert admin.name() == "Harry Potter"


def test_search_finds_user(resolver):
    results = resolver.search("Harry")
    assert [r.to_user().name() for r in results] == ["Harry Potter"]


def test_search_without_match(resolver):
    assert resolver.search("Voldemort") == []


def test_search_result_of_other_kind():
    assert SearchResult("not a user").to_user() is None
    assert AdminResolver(Resolver().user("0x03")).to_user().name() == "Hermione Granger"


def test_friends_without_page(resolver):
    friends = resolver.user("0x02").friends_resolver(None)
    assert [f.name() for f in friends] == [
        "Albus Dumbledore",
        "Hermione Granger",
        "Ronald Weasley",
    ]


def test_friends_first_skips(resolver):
    friends = resolver.user("0x02").friends_resolver(Page(first=1))
    assert [f.name() for f in friends] == ["Hermione Granger", "Ronald Weasley"]


def test_friends_last_limits(resolver):
    friends = resolver.user("0x02").friends_resolver(Page(last=2))
    assert [f.name() for f in friends] == ["Albus Dumbledore", "Hermione Granger"]


def test_friends_last_zero_means_all(resolver):
    user = resolver.user("0x02")
    assert user.friends_resolver(Page(last=0)) == user.friends


def test_friends_first_beyond_count_raises(resolver):
    with pytest.raises(ValueError, match="not enough users"):
        resolver.user("0x01").friends_resolver(Page(first=5))


def test_friendship_is_mutual(resolver):
    for user in (resolver.user(i) for i in ("0x01", "0x02", "0x03", "0x04")):
        for friend in user.friends:
            assert user in friend.friends