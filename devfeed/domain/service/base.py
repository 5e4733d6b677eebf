"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the feed's rules that span more than one entity,
    such as joining power-up counts into comment threads or checking
    generated content against what is already published.
    """

    pass
