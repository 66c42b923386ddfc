"""
Exceptions raised by the Screenly REST API library

Every failure surfaces to the immediate caller as one of these types;
nothing is retried or suppressed at the library level.
"""

from typing import Optional


class ScreenlyError(Exception):
    """Base class for all Screenly REST errors"""


# Authentication / credentials


class AuthenticationError(ScreenlyError):
    """Token verification or credential resolution failed"""


class WrongCredentialsError(AuthenticationError):
    def __init__(self):
        super().__init__("Wrong credentials: the API token was rejected")


class UnknownAuthenticationError(AuthenticationError):
    def __init__(self, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(
            f"Unknown error while verifying token (status code: {status_code})"
        )


class CredentialError(AuthenticationError):
    """The credential could not be located, read or encoded"""


class MissingHomeDirError(CredentialError):
    def __init__(self):
        super().__init__("Could not locate the home directory")


class NoCredentialsError(CredentialError):
    """No token in the environment and the credential file is unreadable"""


class InvalidHeaderError(CredentialError):
    def __init__(self):
        super().__init__("API token cannot be used as a header value")


# Transport / response


class RequestError(ScreenlyError):
    """The request never reached or never completed with the server"""


class WrongResponseStatusError(ScreenlyError):
    """The server answered with an unexpected status code"""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Unexpected response status: {status_code}")


class SerializationError(ScreenlyError):
    """A body or file could not be parsed into the expected structure"""


# Local validation


class ValidationError(ScreenlyError):
    """Local validation failed before any network call was made"""


class NoFieldsToUpdateError(ValidationError):
    def __init__(self):
        super().__init__("No fields to update")


class ManifestValidationError(ValidationError):
    """Manifest file does not match the edge app manifest schema"""


class InvalidManifestValueError(ValidationError):
    """A manifest field holds a value that cannot be published"""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Field cannot be empty: {field}")
