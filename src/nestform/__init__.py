"""nestform: validation core for schema-driven multi-step forms."""

__version__ = "0.1.0"
