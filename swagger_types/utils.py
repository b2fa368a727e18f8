"""Utility functions for loading Swagger documents.

This module provides functions for loading JSON from files and URLs with
proper error handling and validation.
"""

import json
import re
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

# Absolute or protocol-relative URL, e.g. https://host/x or //host/x
URL_PATTERN = re.compile(r"^(?:[a-z]+:)?//", re.IGNORECASE)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def is_url(source: str) -> bool:
    """Tell whether a source string should be fetched rather than read."""
    return bool(URL_PATTERN.match(str(source)))


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load JSON from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Successfully loaded JSON from {file_path}")
        return str(file_path), data
    except UnicodeDecodeError as e:
        logger.error(f"File {file_path} is not valid UTF-8: {e}")
        raise JSONLoaderError(f"File {file_path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}")
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}")
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e


def load_json_from_url(
    url: str, timeout: float = 30, verify: bool = True
) -> tuple[str, Any]:
    """Load JSON data from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.
        verify: Verify the server's TLS certificate.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug(f"Attempting to load JSON from URL: {url}")

    # Protocol-relative URLs default to https
    if url.startswith("//"):
        url = f"https:{url}"

    parsed_url = urlparse(url)
    if parsed_url.scheme not in ("http", "https") or not parsed_url.netloc:
        logger.error(f"Invalid URL format: {url}")
        raise JSONLoaderError(f"Invalid URL: {url}")

    if not verify:
        logger.warning(f"TLS certificate verification disabled for {url}")

    try:
        response = requests.get(url, timeout=timeout, verify=verify)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "json" not in content_type and not url.endswith(".json"):
            logger.warning(f"URL {url} does not have JSON content type: {content_type}")

        data = response.json()
        logger.info(f"Successfully loaded JSON from {url}")
        return url, data

    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.SSLError as e:
        logger.error(f"TLS error for URL {url}: {e}")
        raise JSONLoaderError(
            f"TLS error for URL: {url} (use --insecure to skip verification)"
        ) from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise JSONLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}")
        raise JSONLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}")
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: float = 30,
    verify: bool = True,
) -> tuple[str, Any]:
    """Load JSON data from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).
        verify: Verify TLS certificates (only used for URLs).

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise JSONLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise JSONLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout, verify)


def load_source(source: str, timeout: float = 30, verify: bool = True) -> tuple[str, Any]:
    """Load a document from a path or URL, deciding by the source's shape."""
    if is_url(source):
        return load_json(url=source, timeout=timeout, verify=verify)
    return load_json(file_path=source)
