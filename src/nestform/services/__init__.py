"""Service layer: file-level operations built on the validation core."""
