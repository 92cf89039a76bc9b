import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable


Listener = Callable[..., Awaitable[Any]]



class EventBus:

    """
    Ordered multi-map of event name to listeners.

    Both the platform client and the audio client expose one of these. Every
    listener subscribed to a name is awaited, in subscription order, with the
    positional arguments given to `emit`.
    """

    def __init__(self, name: str = "bus"):
        self.name = name
        self._listeners: defaultdict[str, list[Listener]] = defaultdict(list)


    def subscribe(self, event: str, listener: Listener):
        self._listeners[event].append(listener)


    def unsubscribe(self, event: str, listener: Listener):
        listeners = self._listeners.get(event)
        if listeners and listener in listeners:
            listeners.remove(listener)


    def listeners(self, event: str) -> list[Listener]:
        return list(self._listeners.get(event, ()))


    def has_listeners(self, event: str) -> bool:
        return bool(self._listeners.get(event))


    async def emit(self, event: str, *args):
        for listener in self.listeners(event):
            try:
                await listener(*args)
            except Exception:
                logging.exception(f"💥 Listener for '{event}' on {self.name} failed")
