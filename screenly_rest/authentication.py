"""
Authentication for Screenly REST API

Handles token resolution and storage, token verification, and building
HTTP sessions that sign every request with the active token.
"""

import os
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Union

import requests

from .config import (
    API_BASE_URL,
    CREDENTIAL_FILENAME,
    TOKEN_ENV_VAR,
    USER_AGENT,
    VERIFY_PROBE_GROUP_ID,
)
from .errors import (
    InvalidHeaderError,
    MissingHomeDirError,
    NoCredentialsError,
    RequestError,
    UnknownAuthenticationError,
    WrongCredentialsError,
)
from .logging_config import logger


@dataclass
class Config:
    """Where the Screenly API lives"""

    url: str = API_BASE_URL


class VerificationOutcome(Enum):
    OK = "ok"
    WRONG_CREDENTIALS = "wrong_credentials"
    UNKNOWN = "unknown"


def verification_outcome(status_code: int) -> VerificationOutcome:
    """Interpret the status code of a token verification probe

    The probe targets a group that does not exist, so 404 means the token
    got past authentication.
    """
    if status_code == 404:
        return VerificationOutcome.OK
    if status_code == 401:
        return VerificationOutcome.WRONG_CREDENTIALS
    return VerificationOutcome.UNKNOWN


def authorization_header(token: str) -> str:
    """Build the Authorization header value for a token"""
    if "\r" in token or "\n" in token:
        raise InvalidHeaderError()
    try:
        token.encode("latin-1")
    except UnicodeEncodeError as e:
        raise InvalidHeaderError() from e
    return f"Token {token}"


class CredentialStore:
    """Resolves and persists the API token

    Parameters:
        :environ: mapping to read the token override from (defaults to os.environ)
        :home_dir: directory holding the credential file (defaults to the user's home)
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        home_dir: Optional[Union[str, Path]] = None,
    ):
        self.environ = os.environ if environ is None else environ
        self._home_dir = Path(home_dir) if home_dir is not None else None

    def home_dir(self) -> Path:
        if self._home_dir is not None:
            return self._home_dir
        try:
            return Path.home()
        except (RuntimeError, KeyError) as e:
            raise MissingHomeDirError() from e

    @property
    def credential_path(self) -> Path:
        return self.home_dir() / CREDENTIAL_FILENAME

    def resolve(self) -> str:
        """Return the active token; the environment override wins over the file"""
        token = self.environ.get(TOKEN_ENV_VAR)
        if token:
            return token

        path = self.credential_path
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise NoCredentialsError(
                f"Could not read credentials from {path}: {e}"
            ) from e

    def persist(self, token: str) -> Path:
        """Write the token verbatim, replacing any previous contents"""
        path = self.credential_path
        # Owner-only from creation; chmod covers a pre-existing file
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            os.chmod(path, 0o600)
            f.write(token)
        return path

    def clear(self) -> bool:
        """Remove the stored token. Returns False when there was nothing to remove."""
        path = self.credential_path
        if not path.exists():
            return False
        path.unlink()
        return True


class Authentication:
    """Credential holder and session factory for the Screenly API

    A token passed explicitly takes precedence over the credential store;
    otherwise the store is consulted once, on the first authenticated call.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        token: Optional[str] = None,
        store: Optional[CredentialStore] = None,
    ):
        self.config = config or Config()
        self.store = store or CredentialStore()
        self._token = token

    def read_token(self) -> str:
        if self._token is None:
            self._token = self.store.resolve()
        return self._token

    def verify_token(self, token: str) -> None:
        """Check a candidate token against the API without changing any state"""
        url = f"{self.config.url}/v3/groups/{VERIFY_PROBE_GROUP_ID}/"
        headers = {"Authorization": authorization_header(token)}

        start = time.time()
        try:
            response = requests.get(url, headers=headers)
        except requests.RequestException as e:
            logger.log_api_call("GET", url)
            raise RequestError(f"Token verification request failed: {e}") from e
        logger.log_api_call("GET", url, response.status_code, time.time() - start)

        outcome = verification_outcome(response.status_code)
        if outcome is VerificationOutcome.WRONG_CREDENTIALS:
            raise WrongCredentialsError()
        if outcome is VerificationOutcome.UNKNOWN:
            raise UnknownAuthenticationError(response.status_code)

    def verify_and_store_token(self, token: str) -> Path:
        """Verify a token and, only if it is accepted, save it for later runs"""
        logger.log_operation_start("verify_and_store_token")
        self.verify_token(token)
        path = self.store.persist(token)
        self._token = token
        logger.log_operation_end("verify_and_store_token", True, path=str(path))
        return path

    def build_client(self) -> requests.Session:
        """Return a session whose default headers sign every request"""
        token = self.read_token()
        session = requests.Session()
        session.headers.update(
            {
                "Authorization": authorization_header(token),
                "User-Agent": USER_AGENT,
            }
        )
        return session
