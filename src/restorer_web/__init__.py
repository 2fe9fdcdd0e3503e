"""Flask front end for the text restorer (JSON API + single-page UI)."""
from .web import app

__all__ = ["app"]
