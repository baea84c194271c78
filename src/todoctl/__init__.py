"""todoctl — file-backed todo records with template-driven creation."""

__version__ = "0.1.0"
