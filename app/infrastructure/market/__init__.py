"""
Infrastructure adapters for the market bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system: the database or a remote HTTP API.
"""
