"""Configuration: bound/span tables, settings discovery, logging."""
