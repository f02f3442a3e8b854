"""CLI entry point for creating the database schema."""
import sys

from token_feed.db.sessions import FeedStore, create_store_engine


def init_db() -> None:
    """Create the user and post tables. Pass a database URL as first arg to override DATABASE_URL."""
    url = sys.argv[1] if len(sys.argv) > 1 else None
    store = FeedStore(create_store_engine(url))
    try:
        store.init_db()
    finally:
        store.dispose()
    print(f"Tables ready on {store.engine.url.render_as_string(hide_password=True)}")
