"""Application layer - Handler composition.

This layer turns plain functions into dispatchable handlers:
- decorators: wrap a handler with before/after side effects
- injection: bind collaborators into a handler at registration time

Nothing here holds state. Every helper returns a new callable.
"""
