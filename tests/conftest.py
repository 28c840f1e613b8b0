"""Global pytest fixtures for USERFIELDS."""

from __future__ import annotations

from pathlib import Path

import pytest

from userfields.adapters.id_generators import SimpleIdGenerator
from userfields.adapters.password_hasher import PasslibPasswordHasher
from userfields.bootstrap import AppContainer
from userfields.domain.rules import DEFAULT_RULES

pytest_plugins = [
    "tests.fixtures.datagen",
]


@pytest.fixture
def id_generator() -> SimpleIdGenerator:
    """A deterministic id generator producing 26-digit sequential ids."""
    return SimpleIdGenerator()


@pytest.fixture(scope="session")
def password_hasher() -> PasslibPasswordHasher:
    """A passlib-backed hasher using the default scheme."""
    return PasslibPasswordHasher()


@pytest.fixture
def app(id_generator, password_hasher) -> AppContainer:
    """An application container wired with test-friendly adapters."""
    return AppContainer(
        id_generator=id_generator,
        password_hasher=password_hasher,
        rules=DEFAULT_RULES,
    )


TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKS = {"unit": "unit", "integration": "integration", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark each test after the top-level test directory it lives in."""
    for item in items:
        relative = item.path.resolve().relative_to(TESTS_ROOT)
        mark = DIRECTORY_MARKS.get(relative.parts[0])
        if mark and not any(m.name == mark for m in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, mark))
