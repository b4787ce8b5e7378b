from __future__ import annotations

import json
import logging
from typing import Optional
from urllib.parse import quote

import requests

from . import config
from .errors import NotFoundError, ResponseParseError, TransportError
from .models import DictionaryLookupResult
from .normalize import normalize, strip_markers

logger = logging.getLogger(__name__)

NOT_FOUND_MARKER = "<title>404 Not Found</title>"


def request_moedict(
    keyword: str,
    session: Optional[requests.Session] = None,
    timeout: float = config.TIMEOUT,
) -> str:
    """Fetch the raw entry text for keyword, with emphasis markers removed."""
    url = config.API_URL.format(keyword=quote(keyword, safe=""))
    getter = session.get if session is not None else requests.get
    logger.debug("GET %s", url)
    try:
        resp = getter(url, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("Request for %s failed: %s", keyword, e)
        raise TransportError(keyword, str(e)) from e

    text = strip_markers(resp.text)
    # moedict answers unknown words with an HTML 404 page
    if NOT_FOUND_MARKER in text:
        raise NotFoundError(keyword)

    try:
        resp.raise_for_status()
    except requests.HTTPError as e:
        logger.warning("Request for %s returned HTTP %s", keyword, resp.status_code)
        raise TransportError(keyword, f"HTTP {resp.status_code}") from e

    return text


def parse_response(keyword: str, text: str) -> DictionaryLookupResult:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(keyword, f"invalid JSON ({e.msg})") from e
    if not isinstance(raw, dict):
        raise ResponseParseError(keyword)
    return normalize(raw)


def get_result(
    keyword: str, session: Optional[requests.Session] = None
) -> DictionaryLookupResult:
    text = request_moedict(keyword, session=session)
    return parse_response(keyword, text)
