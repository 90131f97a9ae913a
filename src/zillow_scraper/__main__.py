import logging
import sys

from zillow_scraper.errors import ScraperError
from zillow_scraper.home_search import search_listings
from zillow_scraper.zillow_dataclasses import ZillowListing


DIVIDER = '-' * 30
USAGE = 'Usage: python -m zillow_scraper <zillow_search_url>'
NO_RESULTS = 'No listings found in the response. Check the filters in the URL.'


def print_listing(listing: ZillowListing):
    result = listing.to_dict()
    print(DIVIDER)
    print(f'Name: {result["name"]}')
    print(f'Price: {result["price"]}')
    if result['propertyType']:
        print(f'Type: {result["propertyType"]}')
    if result['detailUrl']:
        print(f'URL: {result["detailUrl"]}')


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE, file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.WARNING, format='%(levelname)s %(name)s: %(message)s')

    try:
        listings = search_listings(args[0])
    except ScraperError as e:
        print(f'Error fetching listings: {e}', file=sys.stderr)
        return 1

    if not listings:
        print(NO_RESULTS)
        return 0

    for listing in listings:
        print_listing(listing)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
