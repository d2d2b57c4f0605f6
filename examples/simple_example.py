#!/usr/bin/env python3
"""Simple example of using the LaTeX macro engine"""

from macro_engine import MacroDispatcher, load_default_macros

# Create dispatcher and load the bundled macros
dispatcher = MacroDispatcher()
macros = load_default_macros()

# Simulate an editor: type one key at a time inside a formula
text, cursor = "$$", 1
print("Typing '//' then 'x2' inside $...$")

for key in "//x2":
    text = text[:cursor] + key + text[cursor:]
    cursor += 1

    outcome = dispatcher.match(text, cursor, macros)
    if outcome:
        text, cursor = outcome.text, outcome.cursor_index
        print(f"  expanded -> {text!r} (cursor {cursor}, stops {outcome.tab_stops})")

print(f"\nFinal buffer: {text}")

# Visual macros wrap a selection instead of firing while typing
boxed = next(m for m in macros if m.trigger == 'B')
outcome = dispatcher.wrap_selection("$E = mc^2$", 1, 9, boxed)
print(f"Boxed selection: {outcome.text}")
