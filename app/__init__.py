"""
MarketMentor - paper trading and trading education platform.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - identity: Accounts, session login, profiles and brokerage keys.
    - market: Brokerage proxy, stock catalog search and news.
    - advisor: LLM-backed analysis, explanations, chat and lesson writing.
    - social: Feed, posts, comments and likes.
    - learning: Lessons, achievements, quizzes and flashcards.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (DB, brokerage, LLM) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
