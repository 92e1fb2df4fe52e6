"""
API errors
==========

Every failure a route can report maps to one of these. Routes catch
``ApiError`` and hand back ``error.to_response()``, which yields the
``({message, error?}, status)`` pair Flask understands.
"""

from flask import jsonify


class ApiError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None, error=None):
        super().__init__(message)
        self.message = message
        self.error = error
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        body = {'message': self.message}
        if self.error:
            body['error'] = self.error
        return body

    def to_response(self):
        return jsonify(self.to_dict()), self.status_code


class ValidationError(ApiError):
    status_code = 400


class MissingField(ValidationError):
    pass


class MissingIdentifier(ValidationError):
    pass


class NoFieldsProvided(ValidationError):
    def __init__(self, message='No fields provided to update.'):
        super().__init__(message)


class InvalidImageData(ValidationError):
    def __init__(self, message='Invalid image data.'):
        super().__init__(message)


class InvalidCategory(ValidationError):
    def __init__(self, message='Invalid category. Allowed: law, politics, foreign affairs, reviews.'):
        super().__init__(message)


class AuthError(ApiError):
    status_code = 401


class ForbiddenError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    status_code = 409


class StorageError(ApiError):
    """Raised by the persistence adapters for any data-store failure."""
    status_code = 500

    def __init__(self, error, message='Storage error.'):
        super().__init__(message, error=str(error))


class ConfigurationError(RuntimeError):
    """Startup-time misconfiguration (missing credentials, unknown backend)."""
