"""
Trigger matcher and dispatcher for typed macros
"""

import re
import regex
import logging
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from .config import EngineConfig
from .math_mode import MathModeDetector
from .models import (
    Macro,
    MacroResult,
    MatchOutcome,
    ReplacementKind,
    Trigger,
    TriggerKind
)
from .replacement import ReplacementCompiler


logger = logging.getLogger(__name__)

_RE_FLAG_MAP = (
    (re.IGNORECASE, regex.IGNORECASE),
    (re.MULTILINE, regex.MULTILINE),
    (re.DOTALL, regex.DOTALL),
    (re.VERBOSE, regex.VERBOSE),
    (re.ASCII, regex.ASCII),
)


class MacroDispatcher:
    """Picks the macro that fires at the cursor and rewrites the buffer."""

    def __init__(self, config: Optional[EngineConfig] = None):
        """Initialize dispatcher with configuration."""
        self.config = config or EngineConfig()

        self.mode_detector = MathModeDetector(force_math=self.config.force_math)
        self.compiler = ReplacementCompiler(self.config)
        self._anchored_pattern = lru_cache(maxsize=self.config.pattern_cache_size)(
            self._compile_anchored
        )

        if self.config.verbose:
            logging.basicConfig(level=logging.INFO)
        if self.config.debug:
            logging.basicConfig(level=logging.DEBUG)

    def match(self, text: str, cursor_index: int, macros: Sequence[Macro],
              force_math: bool = False) -> Optional[MatchOutcome]:
        """Expand the best macro ending at ``cursor_index``.

        Args:
            text: Full buffer
            cursor_index: Caret offset into ``text``
            macros: Macro set, in declaration order
            force_math: Treat the cursor as inside math regardless of ``$``

        Returns:
            MatchOutcome with absolute offsets, or None if nothing fired
        """
        cursor_index = max(0, min(cursor_index, len(text)))
        text_before = text[:cursor_index]
        text_after = text[cursor_index:]

        in_math = self.mode_detector.detect(text, cursor_index, force_math)

        for macro in self.candidates(macros, in_math):
            try:
                hit = self._match_trigger(macro, text_before)
            except (regex.error, TimeoutError) as e:
                logger.warning(f"Skipping macro with trigger {macro.trigger!r}: {e}")
                continue

            if hit is None:
                continue

            start, captures = hit
            result = self.compiler.compile(macro, captures)
            logger.debug(f"Macro {macro.id or macro.trigger!r} fired at {cursor_index}")
            return self._splice(text_before[:start], result, text_after, macro)

        return None

    def candidates(self, macros: Sequence[Macro], in_math: bool) -> List[Macro]:
        """Applicable macros, highest priority first, later declarations first."""
        indexed = [
            (index, macro) for index, macro in enumerate(macros)
            if macro.applies_in(in_math, self.config.math_flag, self.config.text_flag)
            and not macro.is_visual(self.config.visual_token)
        ]
        indexed.sort(key=lambda item: (item[1].priority or 0, item[0]), reverse=True)
        return [macro for _, macro in indexed]

    def wrap_selection(self, text: str, start: int, end: int, macro: Macro) -> MatchOutcome:
        """Replace ``text[start:end]`` with ``macro`` expanded around it."""
        if not macro.replacement_spec.is_template:
            raise ValueError("Only template replacements can wrap a selection")

        start, end = sorted(max(0, min(offset, len(text))) for offset in (start, end))
        result = self.compiler.compile(macro, [], text[start:end])
        return self._splice(text[:start], result, text[end:], macro)

    def _match_trigger(self, macro: Macro,
                       text_before: str) -> Optional[Tuple[int, List[Optional[str]]]]:
        """Return (start of consumed span, captures) or None."""
        trigger = macro.trigger_spec(self.config.regex_flag)

        if trigger.kind is TriggerKind.LITERAL:
            if text_before.endswith(trigger.value):
                return len(text_before) - len(trigger.value), []
            return None

        pattern = self._anchored_pattern(*self._pattern_key(trigger))
        found = pattern.search(text_before, timeout=self.config.pattern_timeout)
        if found is None:
            return None

        if macro.replacement_spec.kind is ReplacementKind.GENERATOR:
            captures = [found.group(0)] + list(found.groups())
        else:
            captures = list(found.groups())
        return found.start(), captures

    @staticmethod
    def _pattern_key(trigger: Trigger) -> Tuple[str, int]:
        source, flags = trigger.source_and_flags()
        if isinstance(trigger.value, re.Pattern):
            # re and regex disagree on some bit values (ASCII)
            flags = sum(
                regex_bit for re_bit, regex_bit in _RE_FLAG_MAP if trigger.value.flags & re_bit
            )
        return source, flags

    @staticmethod
    def _compile_anchored(source: str, flags: int):
        if flags & regex.VERBOSE:
            source += "\n"
        return regex.compile(f"(?:{source})\\Z", flags)

    @staticmethod
    def _splice(prefix: str, result: MacroResult, suffix: str,
                macro: Optional[Macro] = None) -> MatchOutcome:
        offset = len(prefix)
        return MatchOutcome(
            text=prefix + result.text + suffix,
            cursor_index=offset + result.new_cursor,
            tab_stops=[offset + stop for stop in result.tab_stops],
            macro=macro
        )


_default_dispatcher = None


def check_macro_trigger(text: str, cursor_index: int, macros: Sequence[Macro],
                        force_math: bool = False) -> Optional[MatchOutcome]:
    """Run :meth:`MacroDispatcher.match` with the default configuration."""
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = MacroDispatcher()
    return _default_dispatcher.match(text, cursor_index, macros, force_math)
