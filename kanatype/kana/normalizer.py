"""Lyric line normalization for kana table lookups."""

import jaconv


def normalize_input(text: str) -> str:
    """
    Normalize a lyric line for lookups in the kana table.

    This function:
    - Converts katakana to hiragana
    - Converts full-width Latin letters and digits to their ASCII forms
    - Lowercases Latin letters
    - Replaces every whitespace character with a single space

    The result always has the same length as *text*, so indices into the
    normalized string are also valid in the original one.

    Args:
        text: The lyric line as written by the level author

    Returns:
        Normalized text string of the same length
    """
    text = jaconv.kata2hira(text)
    text = jaconv.z2h(text, kana=False, ascii=True, digit=True)
    return ''.join(
        ' ' if ch.isspace() else (ch.lower() if 'A' <= ch <= 'Z' else ch)
        for ch in text
    )
