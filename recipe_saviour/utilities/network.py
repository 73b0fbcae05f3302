"""Network helpers: page download for recipe extraction.

The extractor itself never touches the network; the API layer fetches the page
here and hands the HTML over.
"""
import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from recipe_saviour.domain.errors import PageFetchError
from recipe_saviour.utilities.config import FETCH_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def normalize_url(raw: str) -> str:
    """Trim the URL and add https:// when no scheme was typed.

    Raises PageFetchError when the result is not a usable http(s) URL.
    """
    url = (raw or '').strip()
    if not url.lower().startswith(('http://', 'https://')):
        url = 'https://' + url
    parsed = urlparse(url)
    if not parsed.netloc or ' ' in parsed.netloc or '.' not in parsed.netloc:
        raise PageFetchError(raw, "That doesn't look like a valid URL.")
    return url


async def fetch_page(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """Download a page and return its HTML text."""
    headers = {"User-Agent": USER_AGENT, "Accept": "text/html,application/xhtml+xml"}
    try:
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True, timeout=FETCH_TIMEOUT) as own_client:
                response = await own_client.get(url, headers=headers)
        else:
            response = await client.get(url, headers=headers)
    except httpx.TimeoutException as e:
        logger.warning("Timed out fetching %s: %s", url, e)
        raise PageFetchError(url, "The website took too long to respond. Try again.") from e
    except httpx.ConnectError as e:
        logger.warning("Cannot reach %s: %s", url, e)
        raise PageFetchError(url, "Can't reach this website. Check the URL and your internet connection.") from e
    except httpx.UnsupportedProtocol as e:
        raise PageFetchError(url, "This URL format isn't supported. Try copying the full URL from your browser.") from e
    except httpx.HTTPError as e:
        logger.warning("Network error fetching %s: %s", url, e)
        raise PageFetchError(url, f"Network error: {e}") from e

    if response.status_code >= 400:
        logger.warning("Fetching %s returned HTTP %s", url, response.status_code)
        raise PageFetchError(url, f"The website answered with HTTP {response.status_code}.")
    return response.text
