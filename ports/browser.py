from __future__ import annotations

from typing import Optional, Protocol

from parsers.page import Page


class ModalDriverPort(Protocol):
    """Live browser tab showing a LinkedIn profile."""

    def snapshot(self) -> Page:
        ...

    def click_mutual_connections_link(self) -> bool:
        ...

    def is_modal_open(self) -> bool:
        ...

    def modal_scroll_height(self) -> Optional[int]:
        ...

    def scroll_modal_to(self, position: int) -> None:
        ...

    def close_modal(self) -> None:
        ...
