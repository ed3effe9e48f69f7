"""Exceptions for the URL shortener service layer.

This module contains the exception hierarchy for the service layer.
Every exception carries the HTTP status it maps to and a message that
is safe to show to the user.
"""

from typing import Optional


class ServiceError(Exception):
    """Base exception for all service-level errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Client input is missing or malformed."""

    status_code = 400
    default_message = "Invalid request!"


class MissingFieldError(ValidationError):
    """URL or name was not provided."""

    default_message = "URL and name must not be empty!"


class InvalidURLError(ValidationError):
    """The URL format is invalid."""

    default_message = "Invalid URL format!"


class InvalidNameError(ValidationError):
    """The short name contains characters other than letters, digits and dashes."""

    default_message = "Name may only contain letters, numbers, and dashes (-)!"


class MalformedRequestError(ValidationError):
    """The request body could not be decoded."""

    default_message = "Malformed request body!"


class ConflictError(ServiceError):
    """The requested short name is already in use."""

    status_code = 400
    default_message = "Short URL name is already taken! Please choose another name."


class NotFoundError(ServiceError):
    """No short link with the requested name exists."""

    status_code = 404
    default_message = "URL not found"


class StorageError(ServiceError):
    """The record store could not be read or written.

    The message stays generic; the underlying cause is chained and logged.
    """

    status_code = 500
    default_message = "Internal server error"
