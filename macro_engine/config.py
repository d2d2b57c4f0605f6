"""
Configuration classes for the LaTeX macro engine
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """Main engine configuration."""
    # General settings
    verbose: bool = False
    debug: bool = False
    force_math: bool = False  # treat every buffer as math, e.g. formula-only fields

    # Option flags understood by the dispatcher
    math_flag: str = "m"
    text_flag: str = "t"
    regex_flag: str = "r"

    # Replacement settings
    visual_token: str = "${VISUAL}"
    error_text: str = "ERROR"

    # Performance
    pattern_timeout: Optional[float] = 0.05  # seconds, None disables
    pattern_cache_size: int = 256

    def __post_init__(self):
        """Validate option flags."""
        flags = (self.math_flag, self.text_flag, self.regex_flag)
        for flag in flags:
            if not isinstance(flag, str) or len(flag) != 1:
                raise ValueError(f"Option flags must be single characters, got {flag!r}")
        if len(set(flags)) != len(flags):
            raise ValueError(f"Option flags must be distinct, got {flags}")
        if not self.visual_token:
            raise ValueError("visual_token must not be empty")
        if self.pattern_timeout is not None and self.pattern_timeout <= 0:
            raise ValueError("pattern_timeout must be positive or None")
