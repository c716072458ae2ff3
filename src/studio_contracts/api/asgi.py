"""ASGI entrypoint for the studio contracts API."""

from studio_contracts.api.app import create_app
from studio_contracts.containers import build_container

app = create_app(build_container())
