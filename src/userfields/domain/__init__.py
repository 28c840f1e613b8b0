"""Domain layer for USERFIELDS.

Contains the user record and the pure rules that validate and canonicalize its
fields. This package is deliberately technology-agnostic.

Dependency rule: do not import from `userfields.adapters` or `userfields.entrypoints`.
"""
