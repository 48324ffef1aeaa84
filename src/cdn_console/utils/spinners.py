from __future__ import annotations

from typing import TypeVar

from azure.core.polling import LROPoller
from yaspin.core import Yaspin

T = TypeVar("T")


class Yaspin2(Yaspin):
    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.ok(f"[✔] {self.text}")
        super().__exit__(exc_type, exc_value, traceback)


def spinner(text: str = "", **kwargs) -> Yaspin2:
    return Yaspin2(text=text, timer=True, **kwargs)


def wait_for(poller: LROPoller[T], text: str) -> T:
    """Block on a long-running operation behind a spinner."""
    with spinner(text):
        return poller.result()
