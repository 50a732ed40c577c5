"""Testing fakes – recording processor and scripted network."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from wooflux.actions import Action, ActionsProcessor, Dispatcher
from wooflux.networking import Network


class RecordingProcessor(ActionsProcessor):
    """Processor that records every action it receives.

    Processors sharing a *journal* append ``(name, action)`` to it, which
    makes cross-processor delivery order observable.
    """

    def __init__(
        self,
        categories: Iterable[type[Action]],
        *,
        name: str = "processor",
        journal: list[tuple[str, Action]] | None = None,
        side_effect: Callable[[Action], None] | None = None,
    ) -> None:
        self.name = name
        self.categories = tuple(categories)
        self.received: list[Action] = []
        self.journal = journal if journal is not None else []
        self.side_effect = side_effect

    def register_supported_actions(self, dispatcher: Dispatcher) -> None:
        for category in self.categories:
            dispatcher.register(self, category)

    def on_action(self, action: Action) -> None:
        self.received.append(action)
        self.journal.append((self.name, action))
        if self.side_effect is not None:
            self.side_effect(action)


class FakeNetwork(Network):
    """Network returning scripted responses keyed by ``(method, path)``.

    A scripted :class:`Exception` instance is raised instead of returned.
    """

    def __init__(self, responses: dict[tuple[str, str], Any] | None = None) -> None:
        self.responses: dict[tuple[str, str], Any] = dict(responses or {})
        self.requests: list[dict[str, Any]] = []
        self.closed = False

    def respond(self, method: str, path: str, value: Any) -> None:
        self.responses[(method.upper(), path)] = value

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        self.requests.append({"method": method, "path": path, "params": params, "json": json})
        try:
            value = self.responses[(method.upper(), path)]
        except KeyError:
            raise AssertionError(f"Unexpected request {method} {path}") from None
        if isinstance(value, Exception):
            raise value
        return value

    async def aclose(self) -> None:
        self.closed = True


__all__ = ["FakeNetwork", "RecordingProcessor"]
