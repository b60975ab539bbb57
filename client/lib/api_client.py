"""
API Client Utility

Talks to the number-properties server with retry logic and error handling.
"""

import logging
import time
from typing import Dict, Any, Optional, Callable

import requests

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Server rejected a request (e.g., invalid input)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class APIClient:
    """
    Handle API communication with retry logic.

    Client errors (4xx) are raised immediately as APIError with the server's
    detail message. Connection problems and server errors (5xx) are retried
    with exponential backoff.
    """

    def __init__(self, api_endpoint: str, timeout: int = 30, retry_attempts: int = 3):
        """
        Initialize API client.

        Args:
            api_endpoint: Base API endpoint URL (e.g., 'http://localhost:8000/api/v1')
            timeout: Request timeout in seconds
            retry_attempts: Number of attempts for failed requests
        """
        self.api_endpoint = api_endpoint.rstrip('/')
        self.timeout = timeout
        self.retry_attempts = retry_attempts
        self.logger = logging.getLogger(f"{__name__}.APIClient")

    def _retry_with_exponential_backoff(
        self,
        operation_name: str,
        api_call_func: Callable[[], requests.Response]
    ) -> Optional[requests.Response]:
        """
        Execute an API call with exponential backoff retry logic.

        Args:
            operation_name: Name of operation for logging
            api_call_func: Function that makes the API call and returns response

        Returns:
            Response object if successful, None if all retries failed

        Raises:
            APIError: On a 4xx response other than 429 (not retried)
        """
        for attempt in range(1, self.retry_attempts + 1):
            try:
                response = api_call_func()
                # 429 (rate limited) falls through to raise_for_status and is retried
                if 400 <= response.status_code < 500 and response.status_code != 429:
                    raise APIError(self._error_detail(response), response.status_code)
                response.raise_for_status()
                self.logger.debug(f"{operation_name} succeeded")
                return response
            except requests.RequestException as e:
                if attempt < self.retry_attempts:
                    delay = 2 ** attempt
                    self.logger.warning(
                        f"{operation_name} failed (attempt {attempt}/{self.retry_attempts}): {e}. "
                        f"Retrying in {delay}s..."
                    )
                    try:
                        time.sleep(delay)
                    except KeyboardInterrupt:
                        self.logger.info(f"{operation_name} interrupted during retry wait")
                        return None
                else:
                    self.logger.error(
                        f"{operation_name} failed after {self.retry_attempts} attempts: {e}"
                    )
        return None

    @staticmethod
    def _parse_json(response: requests.Response) -> Dict[str, Any]:
        """
        Decode a successful response body.

        Raises:
            APIError: If the body is not a JSON object (e.g. an HTML page from a proxy)
        """
        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            raise APIError(
                f"Unexpected non-JSON response from server (HTTP {response.status_code})",
                response.status_code
            )
        return data

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        """Extract FastAPI's 'detail' message from an error response."""
        try:
            detail = response.json().get('detail')
        except ValueError:
            detail = None
        if isinstance(detail, str):
            return detail
        if detail:
            # Validation errors come back as a list of dicts
            return "; ".join(str(item.get('msg', item)) for item in detail if isinstance(item, dict)) or str(detail)
        return f"HTTP {response.status_code}: {response.text}"

    def analyze(self, number: str) -> Optional[Dict[str, Any]]:
        """
        Request the analysis of a number.

        Args:
            number: Raw number as typed by the user

        Returns:
            Response dictionary with keys: number, prime_factors, lcm, factorial,
            factorial_error, factorial_is_abbreviated, digit_sum,
            is_perfect_square, display. None if the server was unreachable.

        Raises:
            APIError: If the server rejected the input or sent a non-JSON body
        """
        url = f"{self.api_endpoint}/analyze"

        def api_call():
            return requests.post(url, json={'number': number}, timeout=self.timeout)

        response = self._retry_with_exponential_backoff(f"Analyze {number}", api_call)
        return self._parse_json(response) if response is not None else None

    def gcd(self, a: int, b: int) -> Optional[int]:
        """
        Ask the server for gcd(a, b). Returns None if unreachable.

        Raises:
            APIError: If the server rejected the request or sent a malformed body
        """
        url = f"{self.api_endpoint}/gcd"

        def api_call():
            return requests.get(url, params={'a': a, 'b': b}, timeout=self.timeout)

        response = self._retry_with_exponential_backoff(f"GCD({a}, {b})", api_call)
        if response is None:
            return None
        data = self._parse_json(response)
        if not isinstance(data.get('gcd'), int):
            raise APIError(f"Malformed response from server: {data}", response.status_code)
        return data['gcd']
