"""Core Layer — pure demo logic, no network, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Compute utilities are pure; demo renders only mutate the DemoState they are given

Design Decisions:
    - Functional core separated from imperative shell (routes, loaders, navigator)
"""
