"""Base service class for domain services."""


class Service:
    """Base class for feedback and vote services.

    Services own the rules that span repositories: joining aggregates with
    a viewer's votes, and turning a vote click into a store mutation.
    """

    pass
