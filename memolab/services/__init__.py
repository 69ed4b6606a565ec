"""Services Layer — route loaders and the navigator that sequences them.

Invariants:
    - Loaders are async and either return a complete payload or raise
    - Loader registry is an explicit dict mapping (no auto-discovery)
"""
