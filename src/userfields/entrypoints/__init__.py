"""Entrypoints into USERFIELDS."""
