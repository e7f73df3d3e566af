"""FastAPI router, schemas and dependency wiring for the identity context."""
