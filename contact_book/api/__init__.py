"""API Layer — FastAPI routes, error handlers and request logging.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Thin routes: build the request, run one service operation, translate the Result
"""
