"""Services — request handlers that chain validation, existence checks and persistence.

Invariants:
    - Identity is already resolved when a service function runs
    - Services raise RingsError subclasses; they never build HTTP responses
"""
