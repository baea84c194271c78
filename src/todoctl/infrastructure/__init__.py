"""Infrastructure layer — filesystem adapter, record stores, templates.

This layer depends on the domain layer and third-party libs (Jinja2).
It must never import from services, commands, or output.
"""
