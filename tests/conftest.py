"""Shared fixtures: an in-memory stand-in for the Playwright page API.

FakePage implements only the Page/ElementHandle methods the scraper calls.
Elements are registered by exact selector string.
"""

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeout


class FakeElement:
    """Element handle with fixed text, attributes and outerHTML."""

    def __init__(self, text=None, attrs=None, html=None, visible=True):
        self.text = text
        self.attrs = attrs or {}
        self.html = html if html is not None else f"<div>{text or ''}</div>"
        self.visible = visible
        self.filled = []
        self.clicks = 0

    def text_content(self):
        return self.text

    def get_attribute(self, name):
        return self.attrs.get(name)

    def evaluate(self, expression):
        if "outerHTML" in expression:
            return self.html
        raise NotImplementedError(expression)

    def is_visible(self):
        return self.visible

    def fill(self, value):
        self.filled.append(value)

    def click(self):
        self.clicks += 1


class FakeResponse:
    def __init__(self, status=200):
        self.status = status


class FakePage:
    """Page double recording every navigation, wait, fill and click."""

    def __init__(self, elements=None, url="https://example.com/product/1", status=200):
        self.elements = {}
        for selector, value in (elements or {}).items():
            self.add(selector, value)
        self.url = url
        self.status = status
        self.calls = []
        self.waits = []
        self.goto_failures = {}
        self.failures = {}
        self.screenshot_bytes = b"\xff\xd8fake-jpeg\xff\xd9"

    def add(self, selector, value):
        if isinstance(value, str):
            value = FakeElement(text=value)
        if not isinstance(value, list):
            value = [value]
        self.elements[selector] = value
        return value[0] if value else None

    def _maybe_fail(self, method):
        if method in self.failures:
            raise self.failures[method]

    def _matches(self, selector):
        found = list(self.elements.get(selector, []))
        if not found and ", " in selector:
            for part in selector.split(", "):
                found.extend(self.elements.get(part, []))
        return found

    def query_selector(self, selector):
        self._maybe_fail("query_selector")
        matches = self.elements.get(selector, [])
        return matches[0] if matches else None

    def query_selector_all(self, selector):
        self._maybe_fail("query_selector_all")
        return list(self.elements.get(selector, []))

    def goto(self, url, wait_until=None, timeout=None):
        self.calls.append(("goto", url, wait_until, timeout))
        if url in self.goto_failures:
            raise self.goto_failures[url]
        self._maybe_fail("goto")
        self.url = url
        return FakeResponse(self.status)

    def wait_for_timeout(self, ms):
        self.waits.append(ms)
        self._maybe_fail("wait_for_timeout")

    def wait_for_selector(self, selector, state=None, timeout=None):
        self.calls.append(("wait_for_selector", selector, state, timeout))
        visible = [e for e in self._matches(selector) if e.is_visible()]
        if not visible:
            raise PlaywrightTimeout(f"Timeout {timeout}ms exceeded waiting for {selector}")
        return visible[0]

    def fill(self, selector, value, timeout=None):
        self.calls.append(("fill", selector, timeout))
        self._maybe_fail("fill")
        matches = self._matches(selector)
        if not matches:
            raise PlaywrightTimeout(f"Timeout {timeout}ms exceeded filling {selector}")
        matches[0].fill(value)

    def click(self, selector, timeout=None):
        self.calls.append(("click", selector, timeout))
        matches = self._matches(selector)
        if not matches:
            raise PlaywrightTimeout(f"Timeout {timeout}ms exceeded clicking {selector}")
        matches[0].click()

    def screenshot(self, full_page=False, type=None, quality=None):
        self.calls.append(("screenshot", full_page, type, quality))
        self._maybe_fail("screenshot")
        return self.screenshot_bytes


class FakeSession:
    """BrowserSession double that counts opens and closes."""

    def __init__(self, page, open_error=None):
        self.page = page
        self.open_error = open_error
        self.opened = 0
        self.closed = 0

    def open(self):
        self.opened += 1
        if self.open_error:
            raise self.open_error
        return self.page

    def close(self):
        self.closed += 1


class SessionRecorder:
    """Session factory that remembers every session it created."""

    def __init__(self, page, open_error=None):
        self.page = page
        self.open_error = open_error
        self.sessions = []

    def __call__(self, settings):
        session = FakeSession(self.page, self.open_error)
        self.sessions.append(session)
        return session


@pytest.fixture
def fake_element():
    return FakeElement


@pytest.fixture
def fake_page():
    return FakePage


@pytest.fixture
def session_recorder():
    return SessionRecorder


@pytest.fixture
def playwright_timeout():
    return PlaywrightTimeout
