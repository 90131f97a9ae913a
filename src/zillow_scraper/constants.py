import re
from types import MappingProxyType


DEFAULT_HEADERS = MappingProxyType({
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    'Accept-Language': 'en-US,en;q=0.9,es;q=0.8',
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8',
    'Cache-Control': 'no-cache',
    'Pragma': 'no-cache',
})

DEFAULT_MAX_REDIRECTS = 5
DEFAULT_TIMEOUT = 30.0

ZILLOW_BASE_URL = 'https://www.zillow.com'

SEARCH_PAGE_STORE_PATTERN = re.compile(
    r'<script[^>]*data-zrr-shared-data-key="searchPageStore"[^>]*>(.*?)</script>',
    re.IGNORECASE | re.DOTALL,
)

ADDRESS_UNAVAILABLE = 'address unavailable'
PRICE_UNAVAILABLE = 'price unavailable'
UNKNOWN_TYPE = 'unknown type'
