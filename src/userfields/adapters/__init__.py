"""Concrete implementations of the USERFIELDS interfaces."""
