"""Kana readings for lines that were written with kanji."""

import pykakasi

_kks = pykakasi.kakasi()  # dictionary load is slow, keep one per process


def to_kana_reading(text: str) -> str:
    """Return the hiragana reading of *text*.

    Kanji and katakana are converted by pykakasi; everything else (hiragana,
    Latin letters, punctuation) is passed through unchanged.
    """
    return ''.join(item["hira"] for item in _kks.convert(text))
