"""USERFIELDS test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Adapters exercised against their real third-party libraries.
- e2e/          : The `userfields` CLI invoked end-to-end through Click's runner.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit tests deterministic: pass explicit timestamps and use SimpleIdGenerator.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
