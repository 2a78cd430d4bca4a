from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol


log = logging.getLogger(__name__)


class Subscriber(Protocol):
    def __call__(self, message: str) -> None: ...


@dataclass
class Notifier:
    """
    Liste ordonnée d'abonnés.
    - ordre d'ajout = ordre d'appel
    - pas de dédoublonnage, pas de retrait
    - appel synchrone : si un abonné lève, l'exception remonte tout de suite
      et les abonnés suivants ne sont pas appelés
    """
    _subscribers: list[Subscriber] = field(default_factory=list)

    def subscribe(self, subscriber: Subscriber) -> None:
        if not callable(subscriber):
            raise TypeError("subscriber must be callable")
        self._subscribers.append(subscriber)

    def notify(self, message: str) -> None:
        log.debug("notify %d subscriber(s): %s", len(self._subscribers), message)
        for subscriber in self._subscribers:
            subscriber(message)

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)
