"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent invalid requests or failures of the
    payment gateway.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
