from datetime import datetime

import pytest
from dependency_injector import providers

from token_feed.exceptions import InvalidAmount, UserNotFound
from token_feed.services import PostFeed, UserDirectory
from token_feed.services.posts import (coerce_amount, coerce_holding,
                                       coerce_sold_amount)


@pytest.fixture
def feed(store):
    return PostFeed(store)


@pytest.fixture
def alice(store):
    return UserDirectory(store).create_user("alice", "https://example.com/alice.png")


def test_create_post_defaults_sold_amount(feed, alice):
    post = feed.create_post("alice", "TOKEN1", 10.5, True)

    assert post.sold_amt == 0
    assert post.holding is True
    assert post.bought_amt == 10.5
    assert post.mint == "TOKEN1"
    assert post.user.id == alice.id
    assert post.user.name == "alice"
    assert post.user.avatar == alice.avatar


def test_create_post_unknown_user_writes_nothing(feed, alice):
    before = len(feed.list_all_posts())

    with pytest.raises(UserNotFound):
        feed.create_post("ghost", "TOKEN1", 1.0, True)

    assert len(feed.list_all_posts()) == before


def test_create_post_invalid_amount_writes_nothing(feed, alice):
    with pytest.raises(InvalidAmount):
        feed.create_post("alice", "TOKEN1", "lots", True)
    assert feed.list_all_posts() == []


def test_list_all_posts_newest_first(feed, store):
    directory = UserDirectory(store)
    directory.create_user("alice")
    directory.create_user("bob")

    first = feed.create_post("alice", "T1", 1, True)
    second = feed.create_post("bob", "T2", 2, False)
    third = feed.create_post("alice", "T3", 3, "true")

    posts = feed.list_all_posts()

    assert [p.id for p in posts] == [third.id, second.id, first.id]
    stamps = [p.created_at for p in posts]
    assert stamps == sorted(stamps, reverse=True)


def test_list_posts_by_user(feed, store):
    directory = UserDirectory(store)
    directory.create_user("alice")
    directory.create_user("bob")
    feed.create_post("alice", "T1", 1, True)
    feed.create_post("bob", "T2", 2, True)
    latest = feed.create_post("alice", "T3", 3, True)

    posts = feed.list_posts_by_user("alice")

    assert [p.mint for p in posts] == ["T3", "T1"]
    assert posts[0].id == latest.id
    assert all(p.user.name == "alice" for p in posts)


def test_list_posts_by_user_without_posts(feed, alice):
    assert feed.list_posts_by_user("alice") == []
    assert feed.list_posts_by_user("never-created") == []


@pytest.mark.parametrize(
    "value, expected",
    [(True, True), ("true", True), (False, False), ("false", False),
     ("True", False), ("yes", False), (1, False), (None, False)],
)
def test_coerce_holding(value, expected):
    assert coerce_holding(value) is expected


def test_coerce_amounts():
    assert coerce_amount("10.5") == 10.5
    assert coerce_amount(3) == 3.0
    assert coerce_sold_amount(None) == 0.0
    assert coerce_sold_amount("") == 0.0
    assert coerce_sold_amount("2.25") == 2.25
    for bad in (None, True, "abc", -1, float("nan"), "inf"):
        with pytest.raises(InvalidAmount):
            coerce_amount(bad)


def test_create_post_route(client):
    client.post("/create-user", json={"name": "alice", "avatar": "a.png"})

    res = client.post(
        "/create-post",
        json={"userName": "alice", "mint": "TOKEN1", "boughtAmt": "10.5", "holding": "true"},
    )

    assert res.status_code == 201
    body = res.json()
    assert body["userName"] == "alice"
    assert body["boughtAmt"] == 10.5
    assert body["holding"] is True
    assert body["soldAmt"] == 0
    assert set(body["user"]) == {"id", "name", "avatar"}
    datetime.fromisoformat(body["createdAt"])


def test_create_post_route_unknown_user(client):
    res = client.post(
        "/create-post",
        json={"userName": "ghost", "mint": "TOKEN1", "boughtAmt": 1, "holding": True},
    )

    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}
    assert client.get("/posts").json() == []


def test_create_post_route_bad_amount(client):
    client.post("/create-user", json={"name": "alice"})
    res = client.post(
        "/create-post",
        json={"userName": "alice", "mint": "TOKEN1", "boughtAmt": "abc", "holding": True},
    )
    assert res.status_code == 422
    assert res.json() == {"error": "Invalid amount"}


def test_posts_routes_order_and_filter(client):
    client.post("/create-user", json={"name": "alice"})
    client.post("/create-user", json={"name": "bob"})
    for user, mint in (("alice", "A"), ("bob", "B"), ("alice", "C")):
        client.post(
            "/create-post",
            json={"userName": user, "mint": mint, "boughtAmt": 1, "holding": False},
        )

    all_posts = client.get("/posts").json()
    assert [p["mint"] for p in all_posts] == ["C", "B", "A"]

    bob_posts = client.get("/users/bob/posts").json()
    assert [p["mint"] for p in bob_posts] == ["B"]
    assert client.get("/users/carol/posts").json() == []


class BrokenFeed:
    def create_post(self, **_):
        raise RuntimeError("connection refused by db-host-7")

    def list_all_posts(self):
        raise RuntimeError("connection refused by db-host-7")

    def list_posts_by_user(self, user_name):
        raise RuntimeError("connection refused by db-host-7")


@pytest.fixture
def broken_client(client, container):
    container.post_feed.override(providers.Object(BrokenFeed()))
    return client


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("GET", "/posts", None),
        ("GET", "/users/alice/posts", None),
        ("POST", "/create-post",
         {"userName": "alice", "mint": "TOKEN1", "boughtAmt": 1, "holding": True}),
    ],
)
def test_unexpected_failure_is_hidden(broken_client, caplog, method, path, body):
    res = broken_client.request(method, path, json=body)

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    assert "db-host-7" not in res.text
    assert "db-host-7" in caplog.text


def test_created_at_is_timezone_aware(feed, alice):
    post = feed.create_post("alice", "TOKEN1", 1, True)

    assert alice.created_at.tzinfo is not None
    assert post.created_at.tzinfo is not None
