"""Core interfaces.

Why:
- Defines the contracts (Protocol) that concrete adapters implement.
- Actions depend on these abstractions, so tests can pass in-memory fakes.
"""
