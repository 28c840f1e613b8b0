"""Integration tests.

Purpose
- Exercise adapters against the real libraries they wrap (e.g. ulid-py), including
  thread-safety of shared generators.
"""
