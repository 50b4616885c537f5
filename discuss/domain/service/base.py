"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold no state across calls; each one works on the
    records handed to it or fetched through its repository.
    """

    pass
