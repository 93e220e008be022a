"""Shape-only credential check for the development server.

Nothing is persisted or hashed: any well-formed email and password pass.
"""

from uigen.auth.models import AuthResult

MIN_PASSWORD_LENGTH = 8


def check_credentials(email: str, password: str) -> AuthResult:
    """Validate the form of an email/password pair."""
    email = (email or "").strip()
    if not email or "@" not in email:
        return AuthResult.failure("Invalid email address")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        return AuthResult.failure(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return AuthResult.ok()
