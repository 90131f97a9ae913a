from abc import ABC, abstractmethod
import json
import logging
from typing import Any
from urllib.parse import urljoin

from zillow_scraper.constants import (
    ADDRESS_UNAVAILABLE,
    PRICE_UNAVAILABLE,
    SEARCH_PAGE_STORE_PATTERN,
    UNKNOWN_TYPE,
    ZILLOW_BASE_URL,
)
from zillow_scraper.errors import MalformedPayload, PayloadNotFound
from zillow_scraper.zillow_dataclasses import ZillowListing


logger = logging.getLogger(__name__)


class Scraper(ABC):
    @abstractmethod
    def scrape(self, content: str) -> Any:
        ...


class ZillowSearchResultsPage(Scraper):
    '''
    Scrapes the `searchPageStore` script that Zillow embeds in its search results page.
    The payload lives either under `cat1.searchResults.listResults` or under
    `cat1.searchList.results` depending on which page variant was served.
    '''

    __listing_paths = (
        ('cat1', 'searchResults', 'listResults'),
        ('cat1', 'searchList', 'results'),
    )


    def scrape(self, content: str) -> list[ZillowListing]:
        data = self.__load_payload(content)
        return [self.__to_listing(item) for item in self.__find_raw_listings(data)]


    def __load_payload(self, content: str) -> Any:
        match = SEARCH_PAGE_STORE_PATTERN.search(content)
        if not match:
            raise PayloadNotFound()

        payload = self.__sanitize_payload(match.group(1))
        try:
            return json.loads(payload, parse_constant=_reject_constant)
        except ValueError as e:
            raise MalformedPayload() from e


    def __sanitize_payload(self, raw_payload: str) -> str:
        if not raw_payload:
            raise PayloadNotFound('No JSON payload found in Zillow response.')

        cleaned = raw_payload.strip()
        if cleaned.startswith('<!--'):
            cleaned = cleaned[4:]
        if cleaned.endswith('-->'):
            cleaned = cleaned[:-3]
        return cleaned.strip()


    def __find_raw_listings(self, data: Any) -> list:
        for path in self.__listing_paths:
            listings = _dig(data, *path)
            if listings:
                if not isinstance(listings, list):
                    break
                logger.debug('Found %d raw listings under %s', len(listings), '.'.join(path))
                return listings

        logger.debug('No listings found in search payload')
        return []


    def __to_listing(self, item: Any) -> ZillowListing:
        if not isinstance(item, dict):
            item = {}

        home_info = _dig(item, 'hdpData', 'homeInfo')
        address = item.get('address') or item.get('addressStreet') \
            or _dig(home_info, 'streetAddress') or ADDRESS_UNAVAILABLE
        price = _format_number(item.get('price') or _dig(home_info, 'price') or PRICE_UNAVAILABLE)
        property_type = _dig(home_info, 'homeType') or item.get('statusType') or UNKNOWN_TYPE

        area = item.get('area')
        name_parts = [address, f'{_format_number(area)} sqft' if area else None]
        name = ' - '.join(str(part) for part in name_parts if part)

        detail_url = item.get('detailUrl')
        return ZillowListing(
            name=name or address,
            price=price,
            property_type=property_type,
            detail_url=urljoin(ZILLOW_BASE_URL, detail_url) if detail_url else None
        )


def _dig(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _reject_constant(name: str):
    raise ValueError(f'{name} is not valid JSON')


def _format_number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def extract_listings(html: str) -> list[ZillowListing]:
    return ZillowSearchResultsPage().scrape(html)
