"""DI container: the composition root for store, providers and services.

main.create_app() attaches one Container to app.state; deps.py resolves
services from it. Tests override ``store`` and the providers before startup.
"""
from dependency_injector import containers, providers

from token_feed.db import FeedStore, create_store_engine
from token_feed.providers import JupiterProvider, VybeProvider
from token_feed.services import PostFeed, TokenService, UserDirectory


class Container(containers.DeclarativeContainer):
    engine = providers.Singleton(create_store_engine)
    store = providers.Singleton(FeedStore, engine)

    jupiter_provider = providers.Singleton(JupiterProvider)
    vybe_provider = providers.Singleton(VybeProvider)

    user_directory = providers.Singleton(UserDirectory, store)
    post_feed = providers.Singleton(PostFeed, store)
    token_service = providers.Singleton(
        TokenService,
        jupiter=jupiter_provider,
        vybe=vybe_provider,
    )


def init_container() -> Container:
    """Create a container with the environment's configuration."""
    return Container()
