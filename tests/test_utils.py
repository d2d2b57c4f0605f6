from typing import List, Optional, Sequence, Tuple
from macro_engine.dispatcher import MacroDispatcher
from macro_engine.models import Macro


class EditorState:
    """Minimal stand-in for the editing surface that drives the engine."""

    def __init__(self, text: str = "", cursor: Optional[int] = None):
        self.text = text
        self.cursor = len(text) if cursor is None else cursor
        self.tab_stops: List[int] = []

    def insert(self, char: str):
        self.text = self.text[:self.cursor] + char + self.text[self.cursor:]
        self.tab_stops = [s + len(char) if s >= self.cursor else s for s in self.tab_stops]
        self.cursor += len(char)

    def next_stop(self) -> bool:
        if not self.tab_stops:
            return False
        self.cursor = self.tab_stops.pop(0)
        return True

    def snapshot(self) -> Tuple[str, int, List[int]]:
        return self.text, self.cursor, list(self.tab_stops)


def type_keys(dispatcher: MacroDispatcher, macros: Sequence[Macro], keys: str,
              state: Optional[EditorState] = None, force_math: bool = False) -> EditorState:
    """Type ``keys`` one at a time, expanding macros after every keystroke."""
    state = state or EditorState()
    for key in keys:
        state.insert(key)
        outcome = dispatcher.match(state.text, state.cursor, macros, force_math)
        if outcome:
            state.text = outcome.text
            state.cursor = outcome.cursor_index
            state.tab_stops = list(outcome.tab_stops)
    return state


def slices_at(text: str, offsets: Sequence[int]) -> List[str]:
    """Text following each offset, for readable assertions."""
    return [text[offset:] for offset in offsets]
