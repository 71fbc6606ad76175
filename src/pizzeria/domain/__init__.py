"""Domain layer — menu items, catalog, orders, and lifecycle rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
