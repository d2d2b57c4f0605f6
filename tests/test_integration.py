import pytest
from macro_engine import (
    Macro, MacroDispatcher, EngineConfig, parse_macros, serialize_macros
)
from test_utils import EditorState, slices_at, type_keys


class TestTypingSession:
    """End-to-end typing through the default macro set."""

    def test_enter_math_and_type(self, dispatcher, default_macros):
        """mk → $|$, then auto subscript and a Greek letter."""
        state = type_keys(dispatcher, default_macros, "mk")
        assert state.snapshot() == ("$$", 1, [])

        state = type_keys(dispatcher, default_macros, "x2", state)
        assert state.snapshot() == ("$x_{2}$", 6, [])

        state = type_keys(dispatcher, default_macros, "+;a", state)
        assert state.snapshot() == (r"$x_{2}+\alpha$", 13, [])

    def test_fraction_tab_stops(self, dispatcher, default_macros):
        """Typing into a fraction and jumping between its stops."""
        state = type_keys(dispatcher, default_macros, "//", EditorState("$$", 1))
        assert state.snapshot() == (r"$\frac{}{}$", 7, [9, 10])

        state = type_keys(dispatcher, default_macros, "a", state)
        assert state.tab_stops == [10, 11]

        assert state.next_stop()
        state = type_keys(dispatcher, default_macros, "b", state)
        assert state.next_stop()

        assert state.snapshot() == (r"$\frac{a}{b}$", 12, [])
        assert not state.next_stop()

    def test_sum_defaults(self, dispatcher, default_macros):
        state = type_keys(dispatcher, default_macros, "sum", EditorState("$$", 1))

        assert state.text == r"$\sum_{i=1}^{n} $"
        assert state.cursor == 7
        assert slices_at(state.text, state.tab_stops) == [r"n} $", "$"]

    def test_compiled_pattern_default(self, dispatcher, default_macros):
        state = type_keys(dispatcher, default_macros, "xhat", EditorState("$$", 1))
        assert state.snapshot() == (r"$\hat{x}$", 8, [])

    def test_escaped_brace_default(self, dispatcher, default_macros):
        state = type_keys(dispatcher, default_macros, "set", EditorState("$$", 1))
        assert state.text == r"$\{  \}$"
        assert state.cursor == 4

    def test_math_macros_idle_in_text(self, dispatcher, default_macros):
        state = type_keys(dispatcher, default_macros, "x;a //")
        assert state.snapshot() == ("x;a //", 6, [])

    def test_formula_field_forces_math(self, dispatcher, default_macros):
        state = type_keys(dispatcher, default_macros, "a->b", force_math=True)
        assert state.text == r"a\tob"

    def test_visual_defaults_only_wrap(self, dispatcher, default_macros):
        boxed = next(m for m in default_macros if m.trigger == 'B')

        state = type_keys(dispatcher, default_macros, "B", EditorState("$$", 1))
        assert state.text == "$B$"

        outcome = dispatcher.wrap_selection("$E=mc^2$", 1, 7, boxed)
        assert outcome.text == r"$\boxed{E=mc^2}$"
        assert outcome.cursor_index == 15


class TestCustomMacroSets:

    def test_user_edited_code_form(self, dispatcher, default_macros):
        """A user adds a higher priority override in the code form."""
        source = serialize_macros(default_macros)
        source += "- {trigger: ';a', replacement: '\\\\aleph', options: mA, priority: 1}\n"
        macros = parse_macros(source)

        state = type_keys(dispatcher, macros, ";a", EditorState("$$", 1))
        assert state.text == r"$\aleph$"

    def test_generator_macro_in_set(self, dispatcher, default_macros):
        doubler = Macro(trigger=r"(\d+)!!", replacement=lambda m: str(int(m[1]) * 2), options="rm")
        macros = default_macros + [doubler]

        state = type_keys(dispatcher, macros, "21!!", EditorState("$$", 1))
        assert state.text == "$42$"

    def test_errors_never_reach_editor(self, default_macros):
        dispatcher = MacroDispatcher(EngineConfig(pattern_timeout=0.5))
        macros = parse_macros("- {trigger: '[', replacement: x, options: r}")
        macros += default_macros

        state = type_keys(dispatcher, macros, "[;a", EditorState("$$", 1))
        assert state.text == r"$[\alpha$"
