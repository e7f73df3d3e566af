"""
HTTP layer: one FastAPI router per context (identity, market, advisor,
social, learning) plus the health probe. Routers validate with Pydantic
schemas, build use cases through dependencies and never hold rules.
"""
