"""Users API Package — readiness, diagnostics and user creation over PostgreSQL.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
