"""CLI to exercise a running token_feed API.

Usage:
  feed-client health
  feed-client users create alice --avatar https://example.com/a.png
  feed-client users exists alice
  feed-client posts create alice TOKEN1 10.5 --holding
  feed-client posts list --head 5
  feed-client posts by-user alice
  feed-client tokens data <mint>
"""
import argparse
import json
import sys
from collections.abc import Sequence

import httpx


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    r = client.get("/")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_users_create(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post("/create-user", json={"name": args.name, "avatar": args.avatar})
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_users_exists(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post("/get-user", json={"name": args.name})
    r.raise_for_status()
    exists = r.json()
    print_json(exists)
    return 0 if exists else 1


def cmd_posts_create(client: httpx.Client, args: argparse.Namespace) -> int:
    body = {
        "userName": args.user_name,
        "mint": args.mint,
        "boughtAmt": args.bought_amt,
        "holding": args.holding,
    }
    if args.sold_amt is not None:
        body["soldAmt"] = args.sold_amt
    r = client.post("/create-post", json=body)
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_posts_list(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get("/posts")
    r.raise_for_status()
    data = r.json()
    print(f"Found {len(data)} posts")
    print_json(data[: args.head] if args.head else data)
    return 0


def cmd_posts_by_user(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(f"/users/{args.user_name}/posts")
    r.raise_for_status()
    data = r.json()
    print(f"Found {len(data)} posts by {args.user_name}")
    print_json(data[: args.head] if args.head else data)
    return 0


def cmd_tokens_data(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post("/token-data", json={"mint": args.mint})
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_tokens_details(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post("/token-details", json={"tokenMints": ",".join(args.mints)})
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_tokens_history(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post(
        "/token-history",
        json={"mintAddress": args.mint, "resolution": args.resolution},
    )
    r.raise_for_status()
    print_json(r.json())
    return 0


HANDLERS = {
    "users": {"create": cmd_users_create, "exists": cmd_users_exists},
    "posts": {
        "create": cmd_posts_create,
        "list": cmd_posts_list,
        "by-user": cmd_posts_by_user,
    },
    "tokens": {
        "data": cmd_tokens_data,
        "details": cmd_tokens_details,
        "history": cmd_tokens_history,
    },
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Exercise the token_feed API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:3000",
        help="API base URL (default: http://localhost:3000)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    subparsers.add_parser("health", help="GET / health check")

    users = subparsers.add_parser("users", help="User directory")
    users_sub = users.add_subparsers(dest="users_cmd", required=True)
    p = users_sub.add_parser("create", help="POST /create-user")
    p.add_argument("name")
    p.add_argument("--avatar", default=None)
    p = users_sub.add_parser("exists", help="POST /get-user (exit 1 if absent)")
    p.add_argument("name")

    posts = subparsers.add_parser("posts", help="Post feed")
    posts_sub = posts.add_subparsers(dest="posts_cmd", required=True)
    p = posts_sub.add_parser("create", help="POST /create-post")
    p.add_argument("user_name")
    p.add_argument("mint")
    p.add_argument("bought_amt", type=float)
    p.add_argument("--holding", action="store_true", help="Position is still held")
    p.add_argument("--sold-amt", type=float, default=None)
    p = posts_sub.add_parser("list", help="GET /posts")
    p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")
    p = posts_sub.add_parser("by-user", help="GET /users/{user_name}/posts")
    p.add_argument("user_name")
    p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")

    tokens = subparsers.add_parser("tokens", help="Token data (Jupiter, Vybe)")
    tokens_sub = tokens.add_subparsers(dest="tokens_cmd", required=True)
    p = tokens_sub.add_parser("data", help="POST /token-data")
    p.add_argument("mint")
    p = tokens_sub.add_parser("details", help="POST /token-details")
    p.add_argument("mints", nargs="+")
    p = tokens_sub.add_parser("history", help="POST /token-history")
    p.add_argument("mint")
    p.add_argument("--resolution", default="1d")
    return parser


def run_command(client: httpx.Client, args: argparse.Namespace) -> int:
    """Dispatch parsed args to a handler using ``client``; HTTP errors become exit code 1."""
    if args.command == "health":
        handler = cmd_health
    else:
        handler = HANDLERS[args.command][getattr(args, f"{args.command}_cmd")]
    try:
        return handler(client, args)
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            try:
                print(e.response.json(), file=sys.stderr)
            except ValueError:
                print(e.response.text, file=sys.stderr)
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        with httpx.Client(base_url=args.base_url.rstrip("/"), timeout=args.timeout) as client:
            return run_command(client, args)
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
