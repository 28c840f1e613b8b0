"""Role membership checks over space-separated role strings."""

from .rules import DEFAULT_RULES, ValidationRules
from .value_objects import Role


def is_valid_user_roles(roles: str, rules: ValidationRules = DEFAULT_RULES) -> bool:
    """Return True if every token of `roles` is a recognized role.

    An empty role string (no roles assigned) is valid.
    """
    return all(token in rules.role_names for token in roles.split())


def is_in_role(roles: str, role: Role | str) -> bool:
    """Return True if `role` appears as an exact token of `roles`.

    Substring matches do not count: ``"admin"`` is not in ``"system_admin"``.
    """
    name = role.value if isinstance(role, Role) else role
    return name in roles.split()
