class ScraperError(RuntimeError):
    """Base class for everything the fetch/extract pipeline raises."""


class FetchError(ScraperError):
    pass


class NetworkError(FetchError):
    def __init__(self, url: str, cause: Exception):
        super().__init__(f'Network error while fetching {url}: {cause}')
        self.url = url
        self.cause = cause


class TooManyRedirects(FetchError):
    def __init__(self, url: str, max_redirects: int):
        super().__init__(f'Too many redirects while fetching {url} (limit {max_redirects}).')
        self.url = url
        self.max_redirects = max_redirects


class UnexpectedStatus(FetchError):
    def __init__(self, url: str, status_code: int):
        super().__init__(f'Request failed with status code {status_code}')
        self.url = url
        self.status_code = status_code


class ExtractError(ScraperError):
    pass


class PayloadNotFound(ExtractError):
    def __init__(self, message: str = 'Unable to locate Zillow search data payload in the HTML.'):
        super().__init__(message)


class MalformedPayload(ExtractError):
    def __init__(self, message: str = 'Failed to parse Zillow JSON payload.'):
        super().__init__(message)
