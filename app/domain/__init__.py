"""
Domain layer: entities, errors, ports and the pure rules (stock search,
chart timeframes, flashcard scheduling, XP and achievements).
Nothing here imports a framework or performs IO.
"""
