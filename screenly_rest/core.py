"""
Core operations for Screenly REST API

Handles the four request verbs every resource module is built on:
GET, POST, PATCH and DELETE against the configured API base URL.
"""

import time
from typing import Any, Dict, Optional, Tuple

import requests

from .authentication import Authentication
from .errors import RequestError, SerializationError, WrongResponseStatusError
from .logging_config import logger

# Status codes that count as success, per verb
SUCCESS_STATUS_CODES: Dict[str, Tuple[int, ...]] = {
    "GET": (200,),
    "POST": (201,),
    "PATCH": (200,),
    "DELETE": (200, 204),
}

# Ask the API to echo back created or modified records
RETURN_REPRESENTATION = {"Prefer": "return=representation"}


def is_success(method: str, status_code: int) -> bool:
    """Return True when status_code is an accepted answer to method"""
    return status_code in SUCCESS_STATUS_CODES[method.upper()]


def build_url(auth: Authentication, endpoint: str) -> str:
    return f"{auth.config.url}/{endpoint}"


def send_request(
    auth: Authentication, method: str, endpoint: str, **kwargs: Any
) -> requests.Response:
    """Send a single request with the authenticated session and check its status

    Parameters:
        :auth: Authentication providing the base URL and the signed session
        :method: HTTP verb, one of SUCCESS_STATUS_CODES
        :endpoint: path relative to the base URL, including any query filters
        :kwargs: passed through to requests (json, headers)
    """
    url = build_url(auth, endpoint)
    client = auth.build_client()

    start = time.time()
    try:
        response = client.request(method, url, **kwargs)
    except requests.RequestException as e:
        logger.log_api_call(method, url)
        raise RequestError(f"{method} {url} failed: {e}") from e
    finally:
        client.close()

    logger.log_api_call(method, url, response.status_code, time.time() - start)

    if not is_success(method, response.status_code):
        raise WrongResponseStatusError(response.status_code)
    return response


def parse_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise SerializationError(f"Could not parse response body: {e}") from e


def get(auth: Authentication, endpoint: str) -> Any:
    """Fetch records from endpoint

    Parameters:
        :auth: Authentication instance
        :endpoint: relative path, e.g. "v4/screens?id=eq.<uuid>"
    """
    response = send_request(auth, "GET", endpoint)
    return parse_json(response)


def post(
    auth: Authentication, endpoint: str, payload: Any, unwrap: bool = True
) -> Any:
    """Create records at endpoint and return what the API created

    Parameters:
        :auth: Authentication instance
        :endpoint: relative path
        :payload: JSON-serializable object or list of objects
        :unwrap: return the single record when the API echoes a one-element list
    """
    response = send_request(
        auth, "POST", endpoint, json=payload, headers=RETURN_REPRESENTATION
    )
    result = parse_json(response)
    if unwrap and isinstance(result, list) and len(result) == 1:
        return result[0]
    return result


def patch(auth: Authentication, endpoint: str, payload: Dict[str, Any]) -> Optional[Any]:
    """Update the records matching endpoint with the fields in payload

    Returns the updated records as echoed by the API, or None when the
    response has no body.
    """
    response = send_request(
        auth, "PATCH", endpoint, json=payload, headers=RETURN_REPRESENTATION
    )
    if not response.content:
        return None
    return parse_json(response)


def delete(auth: Authentication, endpoint: str) -> None:
    """Delete the records matching endpoint"""
    send_request(auth, "DELETE", endpoint)
