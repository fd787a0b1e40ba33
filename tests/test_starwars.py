import pytest

from gqlkit.examples.starwars import (
    Resolver,
    ReviewInput,
    convert_length,
    encode_cursor,
    new_friends_connection,
    resolve_character,
    resolve_characters,
)


@pytest.fixture
def resolver():
    return Resolver()


def _names(characters):
    return [c.name() for c in characters]


def test_basic_hero(resolver):
    hero = resolver.hero()
    assert hero.id() == "2001"
    assert hero.name() == "R2-D2"
    assert _names(hero.friends()) == ["Luke Skywalker", "Han Solo", "Leia Organa"]


def test_arguments_height(resolver):
    human = resolver.human("1000")
    assert human.name() == "Luke Skywalker"
    assert human.height() == 1.72
    assert human.height("FOOT") == pytest.approx(5.6430448)


def test_aliases(resolver):
    assert resolver.hero("EMPIRE").name() == "Luke Skywalker"
    assert resolver.hero("JEDI").name() == "R2-D2"


def test_fragments_fields(resolver):
    left = resolver.hero("EMPIRE")
    assert left.appears_in() == ["NEWHOPE", "EMPIRE", "JEDI"]
    assert _names(left.friends()) == ["Han Solo", "Leia Organa", "C-3PO", "R2-D2"]
    assert left.to_human().height() == 1.72
    right = resolver.hero("JEDI")
    assert right.to_human() is None
    assert _names(right.friends()) == ["Luke Skywalker", "Han Solo", "Leia Organa"]


def test_composed_fragments_friend_ids(resolver):
    friends = resolver.hero("EMPIRE").friends()
    assert [f.id() for f in friends] == ["1002", "1003", "2000", "2001"]


def test_inline_fragments(resolver):
    jedi = resolver.hero("JEDI")
    assert jedi.to_droid().primary_function() == "Astromech"
    empire = resolver.hero("EMPIRE")
    assert empire.to_droid() is None
    assert empire.to_human().height() == 1.72


def test_search_single(resolver):
    results = resolver.search("C-3PO")
    assert len(results) == 1
    assert results[0].to_droid().name() == "C-3PO"


def test_search_type_names(resolver):
    results = resolver.search("an")
    kinds = []
    for r in results:
        if r.to_human() is not None:
            kinds.append(("Human", r.to_human().name()))
        elif r.to_droid() is not None:
            kinds.append(("Droid", r.to_droid().name()))
        else:
            kinds.append(("Starship", r.to_starship().name()))
    assert kinds == [
        ("Human", "Han Solo"),
        ("Human", "Leia Organa"),
        ("Starship", "TIE Advanced x1"),
    ]


def test_connections_full(resolver):
    conn = resolver.hero().friends_connection()
    assert conn.total_count() == 3
    info = conn.page_info()
    assert info.start_cursor() == "Y3Vyc29yMQ=="
    assert info.end_cursor() == "Y3Vyc29yMw=="
    assert info.has_next_page() is False
    edges = conn.edges()
    assert [e.cursor() for e in edges] == ["Y3Vyc29yMQ==", "Y3Vyc29yMg==", "Y3Vyc29yMw=="]
    assert [e.node().name() for e in edges] == ["Luke Skywalker", "Han Solo", "Leia Organa"]


def test_connections_paged(resolver):
    conn = resolver.hero().friends_connection(first=1, after="Y3Vyc29yMQ==")
    info = conn.page_info()
    assert info.start_cursor() == "Y3Vyc29yMg=="
    assert info.end_cursor() == "Y3Vyc29yMg=="
    assert info.has_next_page() is True
    assert [e.node().name() for e in conn.edges()] == ["Han Solo"]

    more = resolver.hero().friends_connection(first=1, after="Y3Vyc29yMg==")
    info = more.page_info()
    assert info.start_cursor() == "Y3Vyc29yMw=="
    assert info.has_next_page() is False
    assert [e.cursor() for e in more.edges()] == ["Y3Vyc29yMw=="]
    assert _names(more.friends()) == ["Leia Organa"]


def test_invalid_cursor_raises():
    with pytest.raises(ValueError):
        new_friends_connection(["1000"], after="not base64!")
    with pytest.raises(ValueError):
        new_friends_connection(["1000"], after=encode_cursor(5))


def test_encode_cursor_values():
    assert encode_cursor(0) == "Y3Vyc29yMQ=="
    assert encode_cursor(2) == "Y3Vyc29yMw=="


def test_mutation_reviews(resolver):
    assert resolver.reviews("JEDI") == []
    created = resolver.create_review("JEDI", ReviewInput(stars=5, commentary="This is a great movie!"))
    assert created.stars() == 5
    assert created.commentary() == "This is a great movie!"
    other = resolver.create_review("EMPIRE", ReviewInput(stars=4))
    assert other.stars() == 4
    assert other.commentary() is None
    reviews = resolver.reviews("JEDI")
    assert [(r.stars(), r.commentary()) for r in reviews] == [(5, "This is a great movie!")]


def test_lookups_missing(resolver):
    assert resolver.human("9999") is None
    assert resolver.droid("1000") is None
    assert resolver.starship("1000") is None
    assert resolver.character("9999") is None
    assert resolve_character("nope") is None


def test_character_lookup(resolver):
    assert resolver.character("2000").to_droid().name() == "C-3PO"
    assert resolver.character("1001").to_human().name() == "Darth Vader"


def test_resolve_characters_skips_unknown():
    assert _names(resolve_characters(["1000", "x", "2001"])) == ["Luke Skywalker", "R2-D2"]


def test_mass_and_starships(resolver):
    assert resolver.human("1000").mass() == 77.0
    assert resolver.human("1004").mass() is None
    ships = resolver.human("1000").starships()
    assert [s.name() for s in ships] == ["X-Wing", "Imperial shuttle"]


def test_starship_length(resolver):
    ship = resolver.starship("3001")
    assert ship.length() == 12.5
    assert ship.length("FOOT") == pytest.approx(12.5 * 3.28084)


def test_convert_length_invalid_unit():
    with pytest.raises(ValueError, match="invalid unit"):
        convert_length(1.0, "PARSEC")