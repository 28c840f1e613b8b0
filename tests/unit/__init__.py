"""Unit tests.

Purpose
- Verify the domain rules, adapters and lifecycle flows in isolation.
"""
