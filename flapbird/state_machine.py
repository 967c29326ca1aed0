"""Screen states and the stack-based machine that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    """One screen of the game."""

    paused: bool = False

    @abstractmethod
    def init(self) -> None:
        """Prepare the state when it becomes active."""

    @abstractmethod
    def handle_input(self) -> None:
        """React to pending input events."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by dt seconds."""

    @abstractmethod
    def draw(self, interpolation: float) -> None:
        """Render the state."""

    def pause(self) -> None:
        """Mark the state as paused when another state is pushed on top."""
        self.paused = True

    def resume(self) -> None:
        """Mark the state as active again once it is back on top."""
        self.paused = False


class StateMachine:
    """A stack of states; changes are queued and applied in process_state_changes."""

    def __init__(self) -> None:
        self._states: list[State] = []
        self._new_state: State | None = None
        self._removing = False
        self._adding = False
        self._replacing = False

    def add_state(self, new_state: State, is_replacing: bool = True) -> None:
        """Queue a state to be pushed, optionally replacing the current one."""
        self._adding = True
        self._replacing = is_replacing
        self._new_state = new_state

    def remove_state(self) -> None:
        """Queue removal of the current state."""
        self._removing = True

    def process_state_changes(self) -> None:
        """Apply queued removal, then queued addition."""
        if self._removing and self._states:
            self._states.pop()
            if self._states:
                self._states[-1].resume()
            self._removing = False

        if self._adding and self._new_state is not None:
            if self._states:
                if self._replacing:
                    self._states.pop()
                else:
                    self._states[-1].pause()
            new_state, self._new_state = self._new_state, None
            self._states.append(new_state)
            new_state.init()
            self._adding = False

    def active_state(self) -> State:
        """Return the state on top of the stack."""
        if not self._states:
            raise IndexError("no active state")
        return self._states[-1]