"""
Event Dispatcher
Laravel-style event registry used for view creator and composer hooks
"""
from fnmatch import fnmatchcase
from typing import Any, Callable, Dict, Iterable, List, Union

from laraview.logging import getLogger

logger = getLogger(__name__)


class Dispatcher:
    """
    Synchronous event dispatcher

    Event names may contain '*' wildcards. Wildcard listeners run after the
    listeners registered for the exact event name. A listener returning
    False stops propagation.

    Example:
        events = Dispatcher()
        events.listen('composing: *', lambda view: view.with_('year', 2024))
        events.fire('composing: index', view)
    """

    def __init__(self):
        self._listeners: Dict[str, List[Callable]] = {}
        self._wildcards: Dict[str, List[Callable]] = {}

    def listen(self, events: Union[str, Iterable[str]], listener: Callable):
        """Register a listener for one or more events"""
        if isinstance(events, str):
            events = [events]

        for event in events:
            if '*' in event:
                self._wildcards.setdefault(event, []).append(listener)
            else:
                self._listeners.setdefault(event, []).append(listener)

    def has_listeners(self, event: str) -> bool:
        """Determine if an event has listeners (exact or wildcard)"""
        if self._listeners.get(event):
            return True
        return any(fnmatchcase(event, pattern) for pattern in self._wildcards)

    def has_wildcard_listeners(self, event: str) -> bool:
        return any(fnmatchcase(event, pattern) for pattern in self._wildcards)

    def get_listeners(self, event: str) -> List[Callable]:
        """Get all listeners for an event, exact listeners first"""
        listeners = list(self._listeners.get(event, []))

        for pattern, wildcard_listeners in self._wildcards.items():
            if fnmatchcase(event, pattern):
                listeners.extend(wildcard_listeners)

        return listeners

    def fire(self, event: str, payload: Any = None, halt: bool = False):
        """
        Fire an event and call its listeners

        Args:
            event: Event name
            payload: List/tuple expanded into positional arguments, anything
                else passed as a single argument (None means no arguments)
            halt: Return the first non-None response instead of all responses

        Returns:
            List of listener responses, or the first response when halting
        """
        if payload is None:
            args = ()
        elif isinstance(payload, (list, tuple)):
            args = tuple(payload)
        else:
            args = (payload,)

        responses = []

        for listener in self.get_listeners(event):
            response = listener(*args)

            if halt and response is not None:
                return response

            if response is False:
                logger.debug(f"Propagation of event [{event}] stopped by listener")
                break

            responses.append(response)

        return None if halt else responses

    dispatch = fire

    def until(self, event: str, payload: Any = None):
        """Fire an event until the first non-None response is returned"""
        return self.fire(event, payload, halt=True)

    def forget(self, event: str):
        """Remove a set of listeners from the dispatcher"""
        if '*' in event:
            self._wildcards.pop(event, None)
        else:
            self._listeners.pop(event, None)
