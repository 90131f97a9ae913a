from dataclasses import dataclass, field
from http.cookiejar import DefaultCookiePolicy
import logging
from typing import Mapping
from urllib.parse import urljoin

import requests
from requests.cookies import RequestsCookieJar
from requests.structures import CaseInsensitiveDict

from zillow_scraper.constants import DEFAULT_HEADERS, DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT
from zillow_scraper.errors import NetworkError, TooManyRedirects, UnexpectedStatus
from zillow_scraper.scrapers import extract_listings
from zillow_scraper.zillow_dataclasses import ZillowListing


logger = logging.getLogger(__name__)


@dataclass
class FetchOptions:
    headers: Mapping[str, str] = field(default_factory=dict)
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    timeout: float | None = DEFAULT_TIMEOUT

    def merged_headers(self) -> CaseInsensitiveDict:
        headers = CaseInsensitiveDict(DEFAULT_HEADERS)
        headers.update(self.headers)
        return headers


def new_session() -> requests.Session:
    """
    A plain session: it never stores or sends cookies and ignores proxy,
    CA bundle and netrc settings from the environment.
    """
    session = requests.Session()
    session.trust_env = False
    session.cookies = RequestsCookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))
    return session


def fetch_html(url: str, options: FetchOptions | None = None, session: requests.Session | None = None) -> str:
    """
    GETs `url` and returns the body decoded as UTF-8.

    Redirects are followed by hand so the hop count can be bounded by
    `options.max_redirects`; every hop is sent with the same merged headers.
    Raises `TooManyRedirects`, `UnexpectedStatus` or `NetworkError`.
    """
    options = options or FetchOptions()
    if session is None:
        with new_session() as own_session:
            return _fetch_html(url, options, own_session)
    return _fetch_html(url, options, session)


def _fetch_html(url: str, options: FetchOptions, session: requests.Session) -> str:
    headers = options.merged_headers()
    redirects_left = options.max_redirects

    while True:
        try:
            res = session.get(url, headers=headers, allow_redirects=False, timeout=options.timeout)
        except requests.RequestException as e:
            raise NetworkError(url, e) from e

        location = res.headers.get('location')
        if 300 <= res.status_code < 400 and location:
            if redirects_left <= 0:
                raise TooManyRedirects(url, options.max_redirects)

            next_url = urljoin(url, location)
            logger.debug('%s redirected (%d) to %s', url, res.status_code, next_url)
            url = next_url
            redirects_left -= 1
            continue

        if res.status_code != 200:
            raise UnexpectedStatus(url, res.status_code)

        logger.debug('Fetched %s (%d bytes)', url, len(res.content))
        return res.content.decode('utf-8', errors='replace')


def search_listings(url: str, options: FetchOptions | None = None, session: requests.Session | None = None) -> list[ZillowListing]:
    return extract_listings(fetch_html(url, options=options, session=session))
