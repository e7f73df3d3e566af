"""
Relational persistence: engine/session factory, ORM models,
schema migration and seed data.
"""
