"""Infrastructure — database sessions, SQL repositories, logging setup.

Invariants:
    - The only layer that talks to SQLAlchemy engines directly
"""
