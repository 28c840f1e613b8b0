"""Service layer: explicit user lifecycle flows."""
