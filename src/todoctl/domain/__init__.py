"""Domain layer — record format, identifiers, and collection rules.

This layer depends only on stdlib, pydantic, and tomli-w.
It must never import from services, infrastructure, commands, or config.
"""
