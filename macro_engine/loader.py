"""
Reading and writing macro sets.

Two representations are supported:

* the structured form, a list of dicts with ``trigger``, ``replacement``,
  ``options``, ``priority`` and ``id`` keys
* the code form, a YAML document holding that list, where a trigger
  written as ``/source/flags`` is a compiled pattern
"""

import regex
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from .defaults import DEFAULT_MACROS_SOURCE
from .models import Macro, PATTERN_FLAG_LETTERS, TriggerKind


logger = logging.getLogger(__name__)

_PATTERN_LITERAL = regex.compile(r'^/(.+)/([imsx]*)$', regex.DOTALL)
_KNOWN_KEYS = {'trigger', 'replacement', 'options', 'priority', 'id'}


class MacroConfigError(ValueError):
    """Raised when a macro set cannot be parsed or serialized."""


def parse_macros(source: str) -> List[Macro]:
    """Parse the code form into macros."""
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise MacroConfigError(f"Invalid macro source: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise MacroConfigError("Macro source must be a list of macros")

    return macros_from_dicts(data)


def serialize_macros(macros: Iterable[Macro]) -> str:
    """Write macros in the code form."""
    return yaml.safe_dump(
        macros_to_dicts(macros),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False
    )


def macros_from_dicts(entries: Iterable[Dict[str, Any]]) -> List[Macro]:
    """Build macros from the structured form."""
    macros = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise MacroConfigError(f"Macro {index}: expected a mapping, got {type(entry).__name__}")

        unknown = set(entry) - _KNOWN_KEYS
        if unknown:
            logger.warning(f"Macro {index}: ignoring unknown keys {sorted(unknown)}")

        trigger = entry.get('trigger')
        replacement = entry.get('replacement')
        options = entry.get('options') or ''
        priority = entry.get('priority', 0)

        if not isinstance(trigger, str) or not trigger:
            raise MacroConfigError(f"Macro {index}: trigger must be a non-empty string")
        if not isinstance(replacement, str) or not replacement:
            raise MacroConfigError(f"Macro {index}: replacement must be a non-empty string")
        if not isinstance(options, str):
            raise MacroConfigError(f"Macro {index}: options must be a string")
        if priority is None:
            priority = 0
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise MacroConfigError(f"Macro {index}: priority must be an integer")

        macros.append(Macro(
            trigger=_parse_trigger(trigger, index),
            replacement=replacement,
            options=options,
            priority=priority,
            id=str(entry['id']) if entry.get('id') is not None else f"macro-{index}"
        ))

    logger.debug(f"Loaded {len(macros)} macros")
    return macros


def macros_to_dicts(macros: Iterable[Macro]) -> List[Dict[str, Any]]:
    """Convert macros to the structured form."""
    entries = []
    for index, macro in enumerate(macros):
        replacement = macro.replacement_spec
        if not replacement.is_template:
            raise MacroConfigError(f"Macro {index}: function replacements cannot be serialized")

        trigger = macro.trigger_spec()
        if trigger.kind is not TriggerKind.COMPILED and _PATTERN_LITERAL.match(trigger.value):
            raise MacroConfigError(
                f"Macro {index}: trigger {trigger.value!r} would be read back as a pattern"
            )

        entry: Dict[str, Any] = {
            'trigger': trigger.display(),
            'replacement': replacement.value,
        }
        if macro.options:
            entry['options'] = macro.options
        if macro.priority:
            entry['priority'] = macro.priority
        if macro.id is not None:
            entry['id'] = macro.id
        entries.append(entry)
    return entries


def load_macros(path: Union[str, Path]) -> List[Macro]:
    """Load a macro set from a file in the code form."""
    path = Path(path)
    logger.info(f"Loading macros from {path}")
    return parse_macros(path.read_text(encoding='utf-8'))


def load_default_macros() -> List[Macro]:
    """Parse the bundled default macro set."""
    return parse_macros(DEFAULT_MACROS_SOURCE)


def _parse_trigger(trigger: str, index: int):
    literal = _PATTERN_LITERAL.match(trigger)
    if not literal:
        return trigger

    source, letters = literal.groups()
    flags = 0
    for letter in letters:
        flags |= PATTERN_FLAG_LETTERS[letter]
    try:
        return regex.compile(source, flags)
    except regex.error as e:
        raise MacroConfigError(f"Macro {index}: invalid pattern {source!r}: {e}") from e
