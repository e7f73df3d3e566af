"""FastAPI router, schemas and dependency wiring for the social context."""
