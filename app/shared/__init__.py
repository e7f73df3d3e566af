"""
Cross-cutting plumbing for every MarketMentor context: the domain-error
to HTTP mapping, request logging, secure headers and rate limits.
"""
