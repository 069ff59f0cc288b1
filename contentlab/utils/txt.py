"""
txt.py
-------------------
Text metrics for rendered content.

Intended to be imported by the markdown loader to fill a record's
reading metadata.
"""

from __future__ import annotations

# --- Standard library imports ---
import math
from typing import Dict

# --- Third-party library imports ---
from textstat import lexicon_count  # type: ignore

WORDS_PER_MINUTE = 200


# ----- Word-count & ~reading time -----
def compute_metrics(text: str) -> Dict[str, int]:
    """
    input: text, the raw markdown body
    output: dict with
        - word_count: int, number of words (punctuation ignored)
        - reading_time: int, whole minutes to read, rounded up
    """
    wc: int = lexicon_count(text, removepunct=True) if text.strip() else 0
    rt: int = math.ceil(wc / WORDS_PER_MINUTE)
    return {"word_count": wc, "reading_time": rt}
