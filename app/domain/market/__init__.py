"""
Market bounded context - domain layer.

Entities, errors, ports and pure services for brokerage proxy, stock catalog search and market news.
"""
