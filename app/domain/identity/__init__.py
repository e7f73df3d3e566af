"""
Identity bounded context - domain layer.

Entities, errors, ports and pure services for registration, login sessions and user profiles.
"""
