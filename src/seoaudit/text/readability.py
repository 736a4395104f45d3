import re
from dataclasses import dataclass

_SENTENCE_SPLIT = re.compile(r"[.!?]+\s+")
_NON_ALPHA = re.compile(r"[^a-z\s]")
VOWELS = "aeiouy"


@dataclass
class Readability:
    flesch_reading_ease: float
    flesch_kincaid_grade: float
    word_count: int
    sentence_count: int


def count_syllables(word: str) -> int:
    word = re.sub(r"[^a-z]", "", word.lower())
    if not word:
        return 0
    count = 0
    prev_char_was_vowel = False
    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not prev_char_was_vowel:
            count += 1
        prev_char_was_vowel = is_vowel
    # silent trailing e
    if word.endswith("e") and count > 1:
        count -= 1
    return max(1, count)


def compute_readability(text: str) -> Readability:
    """Flesch Reading Ease and Flesch-Kincaid Grade over natural prose.

    Words here keep stopwords; only non-letters are removed. Scores are not
    clamped, so very short or very dense text can fall outside 0-100.
    """
    sentences = [s for s in _SENTENCE_SPLIT.split(text) if s]
    words = _NON_ALPHA.sub(" ", text.lower()).split()
    num_words = len(words)
    num_sentences = max(1, len(sentences))
    num_syllables = sum(count_syllables(w) for w in words)

    asl = num_words / num_sentences
    asw = num_syllables / num_words if num_words else 0.0
    return Readability(
        flesch_reading_ease=206.835 - 1.015 * asl - 84.6 * asw,
        flesch_kincaid_grade=0.39 * asl + 11.8 * asw - 15.59,
        word_count=num_words,
        sentence_count=num_sentences,
    )
