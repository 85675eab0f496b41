"""Domain Types: actor identity union and enums."""

from pressroom.core.domain_types import (
    AnonymousActor, ArticleSort, ArticleState, AuthenticatedActor, UserId,
)


def test_authenticated_actor_key():
    assert AuthenticatedActor(UserId("42")).actor_key == "user:42"


def test_anonymous_actor_key():
    assert AnonymousActor("10.0.0.7").actor_key == "ip:10.0.0.7"


def test_anonymous_defaults_to_unknown_address():
    assert AnonymousActor().actor_key == "ip:unknown"


def test_user_and_address_keys_never_collide():
    assert AuthenticatedActor(UserId("1.2.3.4")) != AnonymousActor("1.2.3.4")
    assert (
        AuthenticatedActor(UserId("1.2.3.4")).actor_key
        != AnonymousActor("1.2.3.4").actor_key
    )


def test_actors_are_hashable_values():
    assert {AnonymousActor("a"), AnonymousActor("a")} == {AnonymousActor("a")}


def test_article_state_values():
    assert {s.value for s in ArticleState} == {"draft", "published"}


def test_article_sort_values():
    assert ArticleSort("most_viewed") is ArticleSort.MOST_VIEWED
    assert len(ArticleSort) == 4
