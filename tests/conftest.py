from pathlib import Path

import pytest


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def search_page_html() -> str:
    return (FIXTURES / "zillow_search_page.html").read_text(encoding="utf-8")
