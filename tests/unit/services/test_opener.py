import logging
import webbrowser

from linkshortener.services.opener import open_in_browser


def test_open_in_browser(monkeypatch):
    opened = []
    monkeypatch.setattr(webbrowser, 'open', lambda url: opened.append(url) or True)

    assert open_in_browser('https://example.com') is True
    assert opened == ['https://example.com']


def test_open_in_browser_without_browser(monkeypatch, caplog):
    monkeypatch.setattr(webbrowser, 'open', lambda url: False)

    with caplog.at_level(logging.WARNING, logger='linkshortener.services.opener'):
        assert open_in_browser('https://example.com') is False
    assert caplog.records[0].target == 'https://example.com'
