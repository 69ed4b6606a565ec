"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure imports nothing from core/ except the error hierarchy
    - External calls are wrapped with timeout and error mapping

Design Decisions:
    - Thin wrappers over raw clients (ADR: single responsibility)
"""
