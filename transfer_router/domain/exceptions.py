"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class EmptyBatchError(DomainException):
    """No candidate routes were supplied to a selector"""

    pass


class InconsistentRouteError(DomainException):
    """Route total fees do not match the sum of its step fees"""

    pass
