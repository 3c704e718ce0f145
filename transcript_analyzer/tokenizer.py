"""Line-ending normalization and word tokenization."""

import re
from typing import List

# Removed outright, not replaced with a space
_STRIP_PUNCTUATION = re.compile(r'[.,!?"]')


def normalize_line_endings(content: str) -> str:
    """Replace every CRLF with LF so splitting only has to deal with '\\n'."""
    return content.replace('\r\n', '\n')


def tokenize_words(text: str) -> List[str]:
    """
    Split text into lowercase word tokens.

    Strips the characters . , ! ? " and splits on runs of whitespace,
    so "Damn, it!" becomes ["damn", "it"]. Never yields empty tokens.

    Args:
        text: Utterance text

    Returns:
        List of tokens in order of appearance
    """
    return _STRIP_PUNCTUATION.sub('', text.lower()).split()
