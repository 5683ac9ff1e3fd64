from __future__ import annotations

from typing import Any, Dict, List

from parsers.page import Page


_REGISTRY: Dict[str, Any] = {}


def register(name: str, factory) -> None:
    _REGISTRY[name] = factory


def matching_parsers(page: Page) -> List[Any]:
    """Site parsers whose host/path rules match the page, in registration order."""
    matched = []
    for factory in _REGISTRY.values():
        parser = factory()
        if parser.matches(page):
            matched.append(parser)
    return matched
