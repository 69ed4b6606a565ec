"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON; failures use the MemoLabError envelope

Design Decisions:
    - Thin routes: look up session state, delegate to one core render or the Navigator
"""
