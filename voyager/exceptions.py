"""
Exception hierarchy for the Voyager client.

Everything raised on purpose by this package derives from LinkedInError,
so the CLI boundary can catch a single type and report it verbatim.
"""


class LinkedInError(Exception):
    """Base exception for all LinkedIn operations."""


# ── input ────────────────────────────────────────────────────────

class InputError(LinkedInError):
    """Caller supplied an empty or unusable identifier."""


class CredentialsError(LinkedInError):
    """Session cookies are missing."""


# ── API exceptions (HTTP / Voyager) ──────────────────────────────

_STATUS_MESSAGES = {
    400: "Invalid request",
    401: "Session expired. Log into linkedin.com and retry",
    403: "Not authorized for this action. Check your permissions",
    404: "Resource not found",
    429: "Rate limited by LinkedIn",
    999: "LinkedIn is blocking requests. Try again later or rotate your session",
}


class LinkedInRequestError(LinkedInError):
    """LinkedIn API request returned a non-2xx status."""

    def __init__(self, status_code: int, path: str, details: str | None = None):
        self.status_code = status_code
        self.path = path
        self.details = details
        base = _STATUS_MESSAGES.get(status_code, f"Request failed with status {status_code}")
        self.message = f"{base}: {details}" if details else base
        super().__init__(f"{self.message} ({status_code} {path})")


class ProfileNotFoundError(LinkedInError):
    """Profile lookup returned no elements."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Profile not found: {username}")


# ── response parsing ─────────────────────────────────────────────

class ParseError(LinkedInError):
    """A response body matched none of the known shapes for a concept."""

    def __init__(self, concept: str):
        self.concept = concept
        super().__init__(f"Could not parse {concept} from response")
