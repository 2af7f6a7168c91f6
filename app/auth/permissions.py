"""
Central registry of allowed actions per role.
"""
ROLE_SCOPES = {
    "buyer":  set(),
    "vendor": {"submit_onboarding", "edit_profile", "resubmit_verification"},
    "admin":  {"*"},
}

def role_has_scope(role: str, action: str) -> bool:
    scopes = ROLE_SCOPES.get(role, set())
    return "*" in scopes or action in scopes
