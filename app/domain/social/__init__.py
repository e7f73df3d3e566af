"""
Social bounded context - domain layer.

Entities, errors, ports and pure services for the social feed: posts, comments and likes.
"""
