from collections.abc import Callable
from typing import Any

from fastapi import Request

from purchase_orders.infrastructure.container import Container


def get_container(request: Request) -> Container:
    """Return the container attached to the running application."""
    return request.app.state.container


def inject_use_case(provider_name: str) -> Callable[[Request], Any]:
    """
    Create a FastAPI dependency for a container provider.

    The provider is looked up by name on the application's container so
    each app instance (and each test client) resolves its own wiring.
    """

    def dependency(request: Request) -> Any:  # noqa: ANN401
        provider = getattr(get_container(request), provider_name)
        return provider()

    return dependency
