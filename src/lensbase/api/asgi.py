"""ASGI entrypoint for the LensBase API."""

from lensbase.api.app import create_app
from lensbase.containers import build_container

app = create_app(build_container())
