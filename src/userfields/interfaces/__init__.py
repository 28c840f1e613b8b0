"""Outbound ports used by the domain and service layers."""
