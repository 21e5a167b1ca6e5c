"""Domain layer: value shapes, field kinds, calendar rules and messages.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
