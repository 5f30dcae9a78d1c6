"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several aggregates: loading,
    authorizing, mutating and keeping back-references consistent.
    """

    pass
