"""
Replacement compiler: turns a macro replacement into clean text plus
cursor and tab-stop offsets.
"""

import regex
import logging
from typing import Dict, List, Optional, Sequence
from enum import Enum

from .config import EngineConfig
from .models import Macro, MacroResult, ReplacementKind


logger = logging.getLogger(__name__)

ESCAPABLE = frozenset('$}\\')


class ScanState(Enum):
    LITERAL = "literal"
    ESCAPE_PENDING = "escape_pending"
    MARKER_PENDING = "marker_pending"


class ReplacementCompiler:
    """Resolves templates/generators and scans tab-stop markers.

    Template syntax:

    * ``[[k]]``       capture ``k`` of the trigger pattern
    * ``${VISUAL}``   the selected text
    * ``$1`` .. ``$9``  numbered tab stops, visited in id order
    * ``${1:default}``  numbered tab stop with placeholder text
    * ``$0``          final exit position (defaults to end of text)
    * ``\\$``, ``\\}``, ``\\\\``  literal ``$``, ``}`` and ``\\``
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.stop_with_default_pattern = regex.compile(r'\$\{([0-9]+):([^}]+)\}')
        self.simple_stop_pattern = regex.compile(r'\$([0-9]+)')

    def compile(self, macro: Macro, captures: Optional[Sequence[Optional[str]]] = None,
                visual_content: str = "") -> MacroResult:
        """Compile ``macro`` into clean text and relative offsets.

        Args:
            macro: Macro that fired
            captures: Pattern captures (full match array for generators)
            visual_content: Selected text substituted for the visual token

        Returns:
            MacroResult with offsets relative to the start of the text
        """
        raw = self.resolve_raw(macro, list(captures or []), visual_content or "")
        clean, stops, final_offset = self.scan_markers(raw)
        return self._order_stops(clean, stops, final_offset)

    def resolve_raw(self, macro: Macro, captures: List[Optional[str]],
                    visual_content: str = "") -> str:
        """Produce the raw template text before marker scanning."""
        spec = macro.replacement_spec

        if spec.kind is ReplacementKind.GENERATOR:
            try:
                raw = spec.value(captures)
            except Exception as e:
                logger.error(f"Macro function for trigger {macro.trigger!r} failed: {e}")
                return self.config.error_text
            if raw is None:
                return ""
            return raw if isinstance(raw, str) else str(raw)

        raw = spec.value.replace(self.config.visual_token, visual_content)
        for index, capture in enumerate(captures):
            raw = raw.replace(f"[[{index}]]", capture if capture is not None else "")
        return raw

    def scan_markers(self, raw: str):
        """Single pass over ``raw`` collecting tab stops.

        Returns:
            (clean text, {stop id: offset}, final exit offset or None)
        """
        clean: List[str] = []
        clean_length = 0
        stops: Dict[int, int] = {}
        final_offset = None

        state = ScanState.LITERAL
        i = 0
        n = len(raw)

        while i < n:
            char = raw[i]

            if state is ScanState.LITERAL:
                if char == '\\':
                    state = ScanState.ESCAPE_PENDING
                    i += 1
                elif char == '$':
                    state = ScanState.MARKER_PENDING
                else:
                    clean.append(char)
                    clean_length += 1
                    i += 1

            elif state is ScanState.ESCAPE_PENDING:
                if char in ESCAPABLE:
                    clean.append(char)
                    i += 1
                else:
                    # Not an escape; keep the backslash and rescan this char
                    clean.append('\\')
                clean_length += 1
                state = ScanState.LITERAL

            else:
                match = self.stop_with_default_pattern.match(raw, i)
                if match:
                    # ${0:...} is a numbered stop, only bare $0 is the exit
                    stops[int(match.group(1))] = clean_length
                    clean.append(match.group(2))
                    clean_length += len(match.group(2))
                    i = match.end()
                else:
                    match = self.simple_stop_pattern.match(raw, i)
                    if match:
                        stop_id = int(match.group(1))
                        if stop_id == 0:
                            final_offset = clean_length
                        else:
                            stops[stop_id] = clean_length
                        i = match.end()
                    else:
                        clean.append('$')
                        clean_length += 1
                        i += 1
                state = ScanState.LITERAL

        if state is ScanState.ESCAPE_PENDING:
            clean.append('\\')

        return ''.join(clean), stops, final_offset

    @staticmethod
    def _order_stops(clean: str, stops: Dict[int, int],
                     final_offset: Optional[int]) -> MacroResult:
        if final_offset is None:
            final_offset = len(clean)

        ordered = [stops[stop_id] for stop_id in sorted(stops)]
        if not ordered:
            return MacroResult(text=clean, new_cursor=final_offset, tab_stops=[])

        return MacroResult(
            text=clean,
            new_cursor=ordered[0],
            tab_stops=ordered[1:] + [final_offset]
        )


_default_compiler = None


def process_replacement(macro: Macro, captures: Optional[Sequence[Optional[str]]] = None,
                        visual_content: str = "") -> MacroResult:
    """Compile a replacement with the default configuration."""
    global _default_compiler
    if _default_compiler is None:
        _default_compiler = ReplacementCompiler()
    return _default_compiler.compile(macro, captures, visual_content)
