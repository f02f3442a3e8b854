import json

from token_feed.cli.feed_client import build_parser, run_command


def run(client, *argv):
    return run_command(client, build_parser().parse_args(list(argv)))


def test_health(client, capsys):
    assert run(client, "health") == 0
    assert json.loads(capsys.readouterr().out) == {"status": "ok"}


def test_users_and_posts_roundtrip(client, capsys):
    assert run(client, "users", "exists", "alice") == 1
    assert run(client, "users", "create", "alice", "--avatar", "a.png") == 0
    assert run(client, "users", "exists", "alice") == 0
    assert run(client, "posts", "create", "alice", "TOKEN1", "10.5", "--holding") == 0
    capsys.readouterr()

    assert run(client, "posts", "by-user", "alice") == 0
    out = capsys.readouterr().out
    assert out.startswith("Found 1 posts by alice")
    assert '"mint": "TOKEN1"' in out


def test_http_error_exit_code(client, capsys):
    assert run(client, "posts", "create", "ghost", "TOKEN1", "1") == 1
    err = capsys.readouterr().err
    assert "HTTP error: 404" in err
    assert "User not found" in err
