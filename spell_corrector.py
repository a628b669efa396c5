from __future__ import annotations

import re
from collections import Counter
from typing import Iterable

try:
    # Optional dependency providing a large English word list with frequencies
    from wordfreq import iter_wordlist as _wf_iter_wordlist, zipf_frequency as _wf_zipf_frequency
except ImportError:  # pragma: no cover - handled at runtime by from_english_dictionary
    _wf_iter_wordlist = None
    _wf_zipf_frequency = None


LETTERS = "abcdefghijklmnopqrstuvwxyz"

_WORD_RE = re.compile(r"[a-z]+")

# any-script letters, so "café" stays one token and is left alone
_LETTER_RUN_RE = re.compile(r"([^\W\d_]+)")


class FrequencySpeller:
    """Probabilistic spell corrector after Peter Norvig's essay
    (http://norvig.com/spell-correct.html).

    Using the speller takes two steps:

    1. call :meth:`train` with a large text to build the word-frequency model
    2. call :meth:`correct` with a word to get its most likely spelling

    Candidates are searched in tiers: the word itself, then every string one
    edit away, then every string two edits away. The first tier holding a
    known word wins, and inside a tier the most frequent word wins. When two
    candidates share the top count, the one generated first is kept.
    """

    def __init__(self):
        self.letters = LETTERS
        self.word_counts: Counter[str] = Counter()

    @classmethod
    def from_english_dictionary(
        cls,
        *,
        min_length: int = 2,
        max_words: int | None = None,
    ) -> "FrequencySpeller":
        """Build a :class:`FrequencySpeller` seeded from a general English word list.

        This uses the optional ``wordfreq`` package if it is installed. The
        Zipf frequency of each word (roughly 0-8) is scaled to an integer
        count so that common words outrank rare ones.

        Parameters
        ----------
        min_length:
            Ignore words shorter than this, to cut noise (default: 2).
        max_words:
            If set, only the ``max_words`` most frequent words from wordfreq
            are kept. This can improve performance.

        Raises
        ------
        RuntimeError
            If ``wordfreq`` is not installed.
        """
        if _wf_iter_wordlist is None or _wf_zipf_frequency is None:
            raise RuntimeError(
                "wordfreq is not installed. Install it with 'pip install wordfreq' "
                "or train FrequencySpeller() on your own corpus."
            )

        speller = cls()
        kept = 0
        for word in _wf_iter_wordlist("en"):
            if max_words is not None and kept >= max_words:
                break
            # wordfreq lists contractions, digits and accented words too
            if len(word) < min_length or not _WORD_RE.fullmatch(word):
                continue
            count = int(_wf_zipf_frequency(word, "en") * 100)
            if count > 0:
                speller.word_counts[word] += count
                kept += 1
        return speller

    # --- public API -----------------------------------------------------

    def train(self, text: str) -> None:
        """Add one count for every ``[a-z]+`` run of the lowercased *text*."""
        self.word_counts.update(_WORD_RE.findall(text.lower()))

    def correct(self, word: str) -> str:
        """Return the most likely spelling of *word*, or *word* itself.

        *word* is used as given: lowercase it first if the query may carry
        capitals.
        """
        if word in self.word_counts:
            return word

        # first occurrence kept, so generation order still breaks ties
        edits1 = list(dict.fromkeys(self.edits(word)))
        best = self._best_candidate(edits1)
        if best is not None:
            return best

        edits2 = (e2 for e1 in edits1 for e2 in self.edits(e1))
        best = self._best_candidate(edits2)
        if best is not None:
            return best

        return word

    def edits(self, word: str) -> list[str]:
        """All strings one deletion, transposition, alteration or insertion away from *word*.

        Results are in that order and are not deduplicated.
        """
        letters = self.letters
        splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
        deletes = [L + R[1:] for L, R in splits if R]
        transposes = [L + R[1] + R[0] + R[2:] for L, R in splits if len(R) > 1]
        alters = [L + c + R[1:] for L, R in splits if R for c in letters]
        inserts = [L + c + R for L, R in splits for c in letters]
        return deletes + transposes + alters + inserts

    def known(self, words: Iterable[str]) -> set[str]:
        """The subset of *words* that appear in the frequency table."""
        return {w for w in words if w in self.word_counts}

    def frequency(self, word: str) -> int:
        return self.word_counts.get(word, 0)

    def probability(self, word: str) -> float:
        """Relative frequency of *word* in everything trained so far."""
        total = sum(self.word_counts.values())
        if not total:
            return 0.0
        return self.frequency(word) / total

    def fix_string(self, text: str, max_word_length: int | None = None) -> str:
        """Return *text* with every misspelled word corrected.

        Punctuation, whitespace and the case of each word (lower, UPPER,
        Title) are preserved. Words longer than *max_word_length* are left
        alone, since two-edit search on long words gets expensive.
        """
        tokens = self._tokenize(text)
        corrected_tokens: list[str] = []

        for token in tokens:
            if _WORD_RE.fullmatch(token.lower()) and (
                max_word_length is None or len(token) <= max_word_length
            ):
                corrected_tokens.append(self._correct_word_preserve_case(token))
            else:
                corrected_tokens.append(token)

        return "".join(corrected_tokens)

    def __len__(self) -> int:
        return len(self.word_counts)

    def __contains__(self, word: str) -> bool:
        return word in self.word_counts

    # --- internal helpers -----------------------------------------------

    def _best_candidate(self, candidates: Iterable[str]) -> str | None:
        best_word: str | None = None
        best_count = 0
        for candidate in candidates:
            count = self.word_counts.get(candidate, 0)
            if count > best_count:
                best_count = count
                best_word = candidate
        return best_word

    @staticmethod
    def _tokenize(text: str) -> list[str]:
        """Split *text* into letter runs and the separators between them, in order."""
        return [token for token in _LETTER_RUN_RE.split(text) if token]

    def _correct_word_preserve_case(self, word: str) -> str:
        lower = word.lower()
        corrected = self.correct(lower)
        if corrected == lower:
            return word
        return self._apply_case(word, corrected)

    @staticmethod
    def _apply_case(original: str, corrected_lower: str) -> str:
        if original.isupper():
            return corrected_lower.upper()
        if original[0].isupper() and original[1:].islower():
            return corrected_lower.capitalize()
        return corrected_lower
