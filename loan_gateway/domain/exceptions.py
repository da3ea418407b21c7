"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanRequestError(DomainException):
    """Requested amount or period is outside the program bounds"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class UnknownApplicantError(DomainException):
    """Personal code is not present in the applicant registry"""

    pass


class RegistryUnavailableError(DomainException):
    """Applicant registry returned an error or is unreachable"""

    pass
