import pytest

from tests.fakes import payload_html
from zillow_scraper import __main__ as cli
from zillow_scraper.errors import PayloadNotFound, UnexpectedStatus
from zillow_scraper.scrapers import extract_listings
from zillow_scraper.zillow_dataclasses import ZillowListing


URL = "https://www.zillow.com/austin-tx/"


@pytest.fixture
def fake_search(monkeypatch):
    calls = []

    def install(result):
        def search(url):
            calls.append(url)
            if isinstance(result, Exception):
                raise result
            return result
        monkeypatch.setattr(cli, "search_listings", search)
        return calls

    return install


def test_missing_url_prints_usage(capsys):
    assert cli.main([]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage" in captured.err


def test_listings_are_printed_in_order(capsys, fake_search):
    calls = fake_search([
        ZillowListing("123 Main St - 1200 sqft", 450000, "SINGLE_FAMILY", "https://www.zillow.com/homedetails/1_zpid/"),
        ZillowListing("address unavailable", "price unavailable", "unknown type", None),
    ])

    assert cli.main([URL]) == 0
    assert calls == [URL]

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "-" * 30,
        "Name: 123 Main St - 1200 sqft",
        "Price: 450000",
        "Type: SINGLE_FAMILY",
        "URL: https://www.zillow.com/homedetails/1_zpid/",
        "-" * 30,
        "Name: address unavailable",
        "Price: price unavailable",
        "Type: unknown type",
    ]


def test_zero_results_warns_on_stdout(capsys, fake_search):
    fake_search([])

    assert cli.main([URL]) == 0

    captured = capsys.readouterr()
    assert captured.out.strip() == cli.NO_RESULTS
    assert captured.err == ""


@pytest.mark.parametrize("error", [UnexpectedStatus(URL, 403), PayloadNotFound()])
def test_errors_are_reported_on_stderr(capsys, fake_search, error):
    fake_search(error)

    assert cli.main([URL]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error fetching listings:")
    assert str(error) in captured.err


def test_end_to_end_with_page_fixture(capsys, monkeypatch, search_page_html):
    monkeypatch.setattr(cli, "search_listings", lambda url: extract_listings(search_page_html))

    assert cli.main([URL]) == 0

    out = capsys.readouterr().out
    assert "Name: 123 Main St, Austin, TX 78701 - 1200 sqft" in out
    assert "Name: 9 Oak Ln" in out
    assert out.count("-" * 30) == 3


def test_integral_float_price_prints_without_decimal(capsys, monkeypatch):
    html = payload_html('{"cat1": {"searchResults": {"listResults": [{"address": "1 A St", "price": 450000.0}]}}}')
    monkeypatch.setattr(cli, "search_listings", lambda url: extract_listings(html))

    assert cli.main([URL]) == 0
    assert "Price: 450000\n" in capsys.readouterr().out
