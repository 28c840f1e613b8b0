"""Application wiring for USERFIELDS."""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
