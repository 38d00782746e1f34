"""ASGI entrypoint for the meal rota API."""

from meal_rota.api.app import create_app
from meal_rota.containers import build_container

app = create_app(build_container())
