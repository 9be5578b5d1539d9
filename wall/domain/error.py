"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class FetchError(DomainError):
    """Raised when the feedback list could not be loaded."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthenticationRequired(Exception):
    """Signals that an action needs a signed-in user.

    Not a failure: callers route it to the sign-in prompt.
    """

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Sign in required to {action}")
