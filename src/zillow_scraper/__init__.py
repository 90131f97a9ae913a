from zillow_scraper.errors import (
    ExtractError,
    FetchError,
    MalformedPayload,
    NetworkError,
    PayloadNotFound,
    ScraperError,
    TooManyRedirects,
    UnexpectedStatus,
)
from zillow_scraper.home_search import FetchOptions, fetch_html, search_listings
from zillow_scraper.scrapers import extract_listings
from zillow_scraper.zillow_dataclasses import ZillowListing

__all__ = [
    "ExtractError",
    "FetchError",
    "FetchOptions",
    "MalformedPayload",
    "NetworkError",
    "PayloadNotFound",
    "ScraperError",
    "TooManyRedirects",
    "UnexpectedStatus",
    "ZillowListing",
    "extract_listings",
    "fetch_html",
    "search_listings",
]
