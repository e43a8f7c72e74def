"""API Layer — FastAPI routes, response helpers, CORS wrapper and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every JSON body leaves through responses.respond_with_json
"""
