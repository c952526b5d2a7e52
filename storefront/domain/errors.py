# storefront/domain/errors.py
"""
Bledy domenowe. Kazdy niesie status HTTP, ktory zwraca handler w api.
Dziedzicza po wbudowanych wyjatkach, tak jak wczesniej PermissionError/ValueError.
"""


class StorefrontError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationRequired(StorefrontError, PermissionError):
    status_code = 401

    def __init__(self, message: str = "You must be logged in!"):
        super().__init__(message)


class AuthenticationFailed(StorefrontError, PermissionError):
    status_code = 401


class AuthorizationDenied(StorefrontError, PermissionError):
    status_code = 403


class ValidationFailed(StorefrontError, ValueError):
    status_code = 400


class NotFound(StorefrontError, LookupError):
    status_code = 404


class Conflict(StorefrontError, RuntimeError):
    status_code = 409


class UpstreamFailure(StorefrontError, RuntimeError):
    status_code = 502


class PaymentDeclined(UpstreamFailure):
    status_code = 402
