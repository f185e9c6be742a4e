# hangul.py
# Leading-consonant (choseong) decomposition for Hangul syllables.
# A precomposed syllable at U+AC00..U+D7A3 encodes
#   (initial * 21 + medial) * 28 + final
# so the initial consonant is (code - 0xAC00) // 588.
# Output uses compatibility jamo (U+3131 block), the characters a user types
# for abbreviation search, e.g. "한글" -> "ㅎㄱ".

from typing import Tuple

SYLLABLE_BASE = 0xAC00
SYLLABLE_LAST = 0xD7A3
SYLLABLES_PER_INITIAL = 21 * 28  # medials * finals

# choseong order of the Unicode syllable table
LEADING_CONSONANTS = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)


def is_hangul_syllable(ch: str) -> bool:
    return len(ch) == 1 and SYLLABLE_BASE <= ord(ch) <= SYLLABLE_LAST


def leading_consonant(ch: str) -> str:
    """Choseong of one precomposed syllable. Raises ValueError otherwise."""
    if not is_hangul_syllable(ch):
        raise ValueError(f"not a precomposed Hangul syllable: {ch!r}")
    return LEADING_CONSONANTS[(ord(ch) - SYLLABLE_BASE) // SYLLABLES_PER_INITIAL]


def try_decompose_to_leading_consonants(text: str) -> Tuple[bool, str]:
    """
    Return (True, consonants) when every char of `text` is a Hangul syllable.
    Bare jamo, digits, spaces, latin or any other script make the whole call
    fail with (False, ""). Empty input also fails.
    """
    if not text:
        return False, ""
    out = []
    for ch in text:
        if not is_hangul_syllable(ch):
            return False, ""
        out.append(leading_consonant(ch))
    return True, "".join(out)
