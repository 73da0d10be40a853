"""ASGI application."""
