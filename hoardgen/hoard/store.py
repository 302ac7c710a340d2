"""Hoard persistence and user notification collaborators."""

import logging
import uuid
from typing import Optional, Protocol

from hoardgen.hoard.models import HoardContainer, ItemRecord

logger = logging.getLogger(__name__)


class HoardStore(Protocol):
    """Where generated hoards are kept."""

    async def create_container(self, name: str, kind: str, icon_path: str) -> HoardContainer:
        ...

    async def add_items(self, container: HoardContainer, items: list[ItemRecord]) -> None:
        ...


class Notifier(Protocol):
    """Reports the outcome of a hoard generation to the user."""

    def notify_success(self, message: str) -> None:
        ...

    def notify_error(self, message: str) -> None:
        ...


class InMemoryHoardStore:
    """Keeps hoard containers in a dict for the lifetime of the process."""

    def __init__(self):
        self._containers: dict[str, HoardContainer] = {}

    async def create_container(self, name: str, kind: str, icon_path: str) -> HoardContainer:
        container = HoardContainer(
            container_id=f"hoard_{uuid.uuid4().hex[:12]}",
            name=name,
            kind=kind,
            icon_path=icon_path,
        )
        self._containers[container.container_id] = container
        logger.debug(f"Created container {container.container_id} for {name!r}")
        return container

    async def add_items(self, container: HoardContainer, items: list[ItemRecord]) -> None:
        stored = self._containers[container.container_id]
        stored.items.extend(items)

    def get_hoard(self, container_id: str) -> Optional[HoardContainer]:
        return self._containers.get(container_id)

    def list_hoards(self, limit: int = 50) -> list[HoardContainer]:
        return list(self._containers.values())[:limit]

    def __len__(self) -> int:
        return len(self._containers)


class LoggingNotifier:
    """Sends notifications to the log and remembers them."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def notify_success(self, message: str) -> None:
        logger.info(message)
        self.messages.append(("success", message))

    def notify_error(self, message: str) -> None:
        logger.error(message)
        self.messages.append(("error", message))

    @property
    def last(self) -> Optional[tuple[str, str]]:
        return self.messages[-1] if self.messages else None
