from typing import Optional

from ...models import ConnectionState, Transition


class ConnectionStateTracker:

    def __init__(self):
        # Start as DOWN so the first successful poll is treated as an Up edge
        self._state = ConnectionState.DOWN

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def was_up(self) -> bool:
        return self._state == ConnectionState.UP

    def observe(self, is_up: bool) -> Optional[Transition]:
        """Latch the new state and return the edge it produced, if any."""
        new_state = ConnectionState.UP if is_up else ConnectionState.DOWN
        if new_state == self._state:
            return None

        self._state = new_state
        return Transition.UP if new_state == ConnectionState.UP else Transition.DOWN
