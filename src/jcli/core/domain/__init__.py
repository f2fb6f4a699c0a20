"""Domain models and errors.

Why:
- Plain data structures (Pydantic v2, enums) and the typed error hierarchy.
- The domain knows nothing about HTTP or the terminal.
"""
