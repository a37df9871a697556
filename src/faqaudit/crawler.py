"""HTTP page fetcher for static pages."""

import logging
import random
import time
from typing import Optional

import requests

from faqaudit.config import settings
from faqaudit.models import FetchResult

logger = logging.getLogger(__name__)


class WebCrawler:
    """Fetches raw page markup over HTTP."""

    def __init__(self, user_agent: Optional[str] = None):
        """Initialize the web crawler.

        Args:
            user_agent: Custom user agent string for requests (defaults to settings.USER_AGENT)
        """
        self.user_agent = user_agent or settings.USER_AGENT

        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "fr-FR,fr;q=0.9,en;q=0.8",
        })

    def fetch(self, url: str, timeout: int = 10, max_retries: int = 1) -> FetchResult:
        """Fetch a single URL.

        Args:
            url: The URL to fetch
            timeout: Request timeout in seconds
            max_retries: Number of attempts before giving up (1 = no retry, values below 1 count as 1)

        Returns:
            FetchResult with the page markup, or success=False and an error message
        """
        attempts = max(1, max_retries)
        last_error = "Fetch failed"

        for attempt in range(attempts):
            try:
                if attempt > 0:
                    delay = (2 ** attempt) + random.uniform(0, 1)  # Exponential backoff
                    time.sleep(delay)

                start_time = time.time()
                response = self.session.get(url, timeout=timeout, allow_redirects=True)
                load_time = time.time() - start_time

                response.raise_for_status()

                return FetchResult(
                    url=url,
                    html=response.text,
                    status_code=response.status_code,
                    success=True,
                    load_time=load_time,
                )

            except requests.exceptions.HTTPError as e:
                last_error = str(e)

            except requests.exceptions.Timeout:
                last_error = f"Request timeout after {timeout}s"

            except requests.exceptions.ConnectionError as e:
                last_error = f"Connection error: {str(e)}"

            except requests.exceptions.RequestException as e:
                last_error = str(e)

            logger.warning(f"Fetch attempt {attempt + 1}/{attempts} failed for {url}: {last_error}")

        return FetchResult(url=url, success=False, error=last_error)
