"""
Roles and Rights

A right (e.g. "manageBooks") is a named grant checked before an endpoint runs.
Each role maps to the set of rights it holds; users carry a role, never
individual rights.
"""

ROLE_RIGHTS: dict[str, frozenset[str]] = {
    "user": frozenset(),
    "librarian": frozenset({"manageBooks"}),
    "admin": frozenset({"getUsers", "manageBooks"}),
}

ROLES = tuple(ROLE_RIGHTS)


def get_rights_for_role(role: str) -> frozenset[str]:
    """Rights held by a role; unknown roles hold none."""
    return ROLE_RIGHTS.get(role, frozenset())
