from __future__ import annotations

from typing import Dict, List, Optional

from services.playwright_driver import PlaywrightModalDriver


class _Element:
    def __init__(self, text: str = "", children: Optional[Dict[str, "_Element"]] = None, height: int = 0) -> None:
        self.text = text
        self.children = children or {}
        self.height = height
        self.clicks = 0
        self.scroll_top: Optional[int] = None

    def text_content(self) -> str:
        return self.text

    def click(self) -> None:
        self.clicks += 1

    def query_selector(self, selector: str):
        return self.children.get(selector)

    def evaluate(self, script: str, arg=None):
        if "scrollHeight" in script:
            return self.height
        self.scroll_top = arg
        return None


class _Page:
    url = "https://www.linkedin.com/in/jane-doe/"

    def __init__(self, elements: Dict[str, _Element], links: List[_Element]) -> None:
        self.elements = elements
        self.links = links

    def content(self) -> str:
        return '<html><body><h1 class="text-heading-xlarge">Jane Doe</h1></body></html>'

    def query_selector(self, selector: str):
        return self.elements.get(selector)

    def query_selector_all(self, selector: str):
        return self.links if "facetNetwork" in selector else []


def test_clicks_mutual_link_and_scrolls_modal():
    link = _Element("12 mutual connections")
    content = _Element(height=640)
    dismiss = _Element()
    page = _Page(
        {".artdeco-modal": _Element(), ".artdeco-modal__content": content, ".artdeco-modal__dismiss": dismiss},
        [_Element("Followers"), link],
    )
    driver = PlaywrightModalDriver(page)

    assert driver.snapshot().text_of("h1") == "Jane Doe"
    assert driver.click_mutual_connections_link() is True
    assert link.clicks == 1
    assert driver.is_modal_open() is True
    assert driver.modal_scroll_height() == 640
    driver.scroll_modal_to(640)
    assert content.scroll_top == 640
    driver.close_modal()
    assert dismiss.clicks == 1


def test_falls_back_to_mutual_connections_section():
    inner = _Element("Jane and 3 others")
    page = _Page({'[data-test-id="mutual-connections"]': _Element(children={"a": inner})}, [])
    driver = PlaywrightModalDriver(page)
    assert driver.click_mutual_connections_link() is True
    assert inner.clicks == 1


def test_missing_elements_are_tolerated():
    driver = PlaywrightModalDriver(_Page({}, []))
    assert driver.click_mutual_connections_link() is False
    assert driver.is_modal_open() is False
    assert driver.modal_scroll_height() is None
    driver.scroll_modal_to(100)
    driver.close_modal()
