"""
LaTeX Macro Engine

Snippet expansion for a LaTeX typing trainer: detects typed triggers at
the cursor and rewrites the buffer with tab-stop aware replacements.
"""

__version__ = "0.1.0"
__author__ = "LaTeX Typing Trainer Team"

# Import models
from .models import (
    Macro,
    MacroResult,
    MatchOutcome,
    Trigger,
    TriggerKind,
    Replacement,
    ReplacementKind
)

# Import configuration
from .config import EngineConfig

# Import core components
from .math_mode import MathModeDetector, is_inside_math
from .replacement import ReplacementCompiler, process_replacement
from .dispatcher import MacroDispatcher, check_macro_trigger

# Import macro set loading
from .loader import (
    MacroConfigError,
    parse_macros,
    serialize_macros,
    macros_from_dicts,
    macros_to_dicts,
    load_macros,
    load_default_macros
)
from .defaults import DEFAULT_MACROS_SOURCE

# Export public APIs
__all__ = [
    # Version
    "__version__",

    # Models
    "Macro",
    "MacroResult",
    "MatchOutcome",
    "Trigger",
    "TriggerKind",
    "Replacement",
    "ReplacementKind",

    # Configuration
    "EngineConfig",

    # Core components
    "MathModeDetector",
    "is_inside_math",
    "ReplacementCompiler",
    "process_replacement",
    "MacroDispatcher",
    "check_macro_trigger",

    # Macro sets
    "MacroConfigError",
    "parse_macros",
    "serialize_macros",
    "macros_from_dicts",
    "macros_to_dicts",
    "load_macros",
    "load_default_macros",
    "DEFAULT_MACROS_SOURCE"
]

# Convenience function
def create_dispatcher(**kwargs):
    """Create a configured macro dispatcher instance."""
    config = EngineConfig(**kwargs)
    return MacroDispatcher(config)
