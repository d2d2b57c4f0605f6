"""
Math-mode detection for the text before the cursor
"""

import logging


logger = logging.getLogger(__name__)


def is_inside_math(text: str, cursor_index: int) -> bool:
    """Check whether the cursor sits inside an open ``$...$`` region.

    Counts unescaped dollar signs before the cursor; an odd count means an
    inline formula has been opened and not closed. Display math, comments
    and verbatim blocks are not understood.
    """
    dollar_count = 0
    escaped = False

    for char in text[:max(cursor_index, 0)]:
        if char == '\\':
            escaped = not escaped
        else:
            if char == '$' and not escaped:
                dollar_count += 1
            escaped = False

    return dollar_count % 2 == 1


class MathModeDetector:
    """Decides math/text mode for the dispatcher."""

    def __init__(self, force_math: bool = False):
        self.force_math = force_math

    def detect(self, text: str, cursor_index: int, force_math: bool = False) -> bool:
        """Return True in math mode, honouring any forced override."""
        if force_math or self.force_math:
            return True
        in_math = is_inside_math(text, cursor_index)
        logger.debug(f"Mode at {cursor_index}: {'math' if in_math else 'text'}")
        return in_math
