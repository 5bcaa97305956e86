"""ASGI entrypoint for the reservia API."""

from reservia.api.app import create_app
from reservia.containers import build_container

app = create_app(build_container())
