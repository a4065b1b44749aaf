"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InsufficientForecastDataException(DomainException):
    """Raised when a forecast has fewer days than the next-hours window needs"""
    pass


class UserLocationNotFoundException(DomainException):
    """Raised when a forecast update is requested without a stored location"""
    pass


class WeatherProviderException(DomainException):
    """Raised when the weather provider fails after retries"""
    pass


class ForecastStorageException(DomainException):
    """Raised when a stored forecast cannot be decoded"""
    pass
