"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External backend error.

    The message is the backend's own message, unchanged, so it can be
    shown to the user as-is.
    """

    pass


class SubscriptionError(AdapterError):
    """Realtime subscription could not be opened."""

    pass
