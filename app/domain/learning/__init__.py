"""
Learning bounded context - domain layer.

Entities, errors, ports and pure services for lessons, achievements, quizzes and flashcards.
"""
