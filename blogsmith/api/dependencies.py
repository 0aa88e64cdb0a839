"""Request dependencies."""

from fastapi import Request

from ..config import Config
from ..pipeline import Services, build_services


def get_services(request: Request) -> Services:
    """Services attached to the app, built from the config file on first use."""
    services = getattr(request.app.state, "services", None)
    if services is None:
        services = build_services(Config())
        request.app.state.services = services
    return services
