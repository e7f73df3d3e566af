"""
Advisor bounded context - domain layer.

Entities, errors, ports and pure services for LLM-generated market commentary, explanations and lessons.
"""
