"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from wall.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically. Open one
    request scope per mounted view:

        container = create_container()
        async with container() as scope:
            view = await scope.get(FeedbackView)
            async with view:
                ...
        await container.close()

    Returns:
        Configured DI container with production providers
    """
    # Get provider instances - all are instantiated without arguments
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
