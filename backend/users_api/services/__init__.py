"""Services Layer — persistence workflows called by the API routes.

Invariants:
    - Services take an AsyncSession; they never open their own
"""
