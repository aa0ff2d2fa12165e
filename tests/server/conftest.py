"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from nmeastream import GNSSData


class ControlledGNSSReader:
    def __init__(self) -> None:
        self.message_queue: queue.Queue[GNSSData | None] = queue.Queue()

    def __enter__(self) -> "ControlledGNSSReader":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.message_queue.put(None)

    def __iter__(self) -> Iterator[GNSSData]:
        while True:
            item = self.message_queue.get()
            if item is None:
                break
            yield item


@pytest.fixture(autouse=True)
def gnss_controller() -> Iterator[ControlledGNSSReader]:
    controller = ControlledGNSSReader()
    with patch("server.main.GNSSReader", return_value=controller):
        yield controller
    controller.message_queue.put(None)
