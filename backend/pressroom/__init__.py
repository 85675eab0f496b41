"""Pressroom Application Package: content lifecycle and engagement engine.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
