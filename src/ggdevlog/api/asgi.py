"""ASGI entrypoint for the GGDevLog API."""

from ggdevlog.api.app import create_app
from ggdevlog.containers import build_container

app = create_app(build_container())
