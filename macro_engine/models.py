"""
Data models for the LaTeX macro engine
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple, Union, Callable
from enum import Enum


# Flag bits shared by ``re`` and ``regex`` that have a slash-literal letter
PATTERN_FLAG_LETTERS = {
    'i': 2,   # IGNORECASE
    'm': 8,   # MULTILINE
    's': 16,  # DOTALL
    'x': 64,  # VERBOSE
}

Generator = Callable[[List[Optional[str]]], Any]


class TriggerKind(Enum):
    """Ways a trigger can be matched against the text before the cursor."""
    LITERAL = "literal"
    PATTERN_SOURCE = "pattern_source"
    COMPILED = "compiled"


class ReplacementKind(Enum):
    """Types of replacements."""
    TEMPLATE = "template"
    GENERATOR = "generator"


def _is_compiled_pattern(value: Any) -> bool:
    return hasattr(value, 'pattern') and hasattr(value, 'flags') and hasattr(value, 'search')


@dataclass(frozen=True)
class Trigger:
    """A resolved trigger: the raw value plus how it must be matched."""
    kind: TriggerKind
    value: Any

    @classmethod
    def resolve(cls, raw: Any, options: str = "", regex_flag: str = "r") -> "Trigger":
        """Classify a raw trigger using the macro's option flags."""
        if isinstance(raw, Trigger):
            return raw
        if isinstance(raw, str):
            if regex_flag in (options or ""):
                return cls(TriggerKind.PATTERN_SOURCE, raw)
            return cls(TriggerKind.LITERAL, raw)
        if _is_compiled_pattern(raw) and isinstance(raw.pattern, str):
            return cls(TriggerKind.COMPILED, raw)
        raise TypeError(f"Unsupported trigger type: {type(raw).__name__}")

    @property
    def is_pattern(self) -> bool:
        return self.kind is not TriggerKind.LITERAL

    def source_and_flags(self) -> Tuple[str, int]:
        """Pattern source and flag bits (0 for string triggers)."""
        if self.kind is TriggerKind.COMPILED:
            return self.value.pattern, self.value.flags
        return self.value, 0

    def display(self) -> str:
        """Human readable form; compiled patterns use ``/source/flags``."""
        if self.kind is TriggerKind.COMPILED:
            source, flags = self.source_and_flags()
            letters = ''.join(
                letter for letter, bit in PATTERN_FLAG_LETTERS.items() if flags & bit
            )
            return f"/{source}/{letters}"
        return self.value


@dataclass(frozen=True)
class Replacement:
    """A resolved replacement: a template string or a generator callable."""
    kind: ReplacementKind
    value: Union[str, Generator]

    @classmethod
    def resolve(cls, raw: Any) -> "Replacement":
        if isinstance(raw, Replacement):
            return raw
        if isinstance(raw, str):
            return cls(ReplacementKind.TEMPLATE, raw)
        if callable(raw):
            return cls(ReplacementKind.GENERATOR, raw)
        raise TypeError(f"Unsupported replacement type: {type(raw).__name__}")

    @property
    def is_template(self) -> bool:
        return self.kind is ReplacementKind.TEMPLATE


@dataclass
class Macro:
    """A rewrite rule fired when its trigger is typed."""
    trigger: Any  # str or compiled pattern
    replacement: Union[str, Generator]
    options: str = ""
    priority: int = 0
    id: Optional[str] = None

    def __post_init__(self):
        """Normalize empty options/priority and reject unusable values."""
        if self.options is None:
            self.options = ""
        if self.priority is None:
            self.priority = 0
        # Both raise TypeError for unsupported values
        Trigger.resolve(self.trigger)
        Replacement.resolve(self.replacement)

    def trigger_spec(self, regex_flag: str = "r") -> Trigger:
        return Trigger.resolve(self.trigger, self.options, regex_flag)

    @property
    def replacement_spec(self) -> Replacement:
        return Replacement.resolve(self.replacement)

    def is_visual(self, token: str = "${VISUAL}") -> bool:
        """Whether the template needs selected text to expand."""
        spec = self.replacement_spec
        return spec.is_template and token in spec.value

    def applies_in(self, in_math: bool, math_flag: str = "m", text_flag: str = "t") -> bool:
        """Check the mode flags against the current mode."""
        if math_flag in self.options and not in_math:
            return False
        if text_flag in self.options and in_math:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        spec = self.replacement_spec
        return {
            'id': self.id,
            'trigger': self.trigger_spec().display(),
            'replacement': spec.value if spec.is_template else '(function)',
            'options': self.options,
            'priority': self.priority,
        }


@dataclass
class MacroResult:
    """Compiled replacement with offsets relative to the inserted text."""
    text: str
    new_cursor: int
    tab_stops: List[int] = field(default_factory=list)


@dataclass
class MatchOutcome:
    """New buffer state after a macro fired; offsets are absolute."""
    text: str
    cursor_index: int
    tab_stops: List[int] = field(default_factory=list)
    macro: Optional[Macro] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'text': self.text,
            'cursor_index': self.cursor_index,
            'tab_stops': list(self.tab_stops),
            'macro_id': self.macro.id if self.macro else None,
        }
