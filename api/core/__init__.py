"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that multiple features use
(env settings, MongoDB client wiring). Keep feature-specific queries and
business logic in the corresponding feature package (e.g. `songs/`).
"""

