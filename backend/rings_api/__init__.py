"""Rings API Package — user accounts and ring resources behind bearer-token auth.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
