from __future__ import annotations
import os
import sys

from spell_corrector import FrequencySpeller
from utils import read_from_text_file


def main(argv: list[str] | None = None) -> int:
    """Train on a corpus file and print the correction of one word.

    Usage:
        python spellchecker.py <training-file> <word>

    Prints "<word> -> <correction>" and returns 0. A wrong number of
    arguments or an unreadable training file is reported on stderr and
    returns 1.
    """
    if argv is None:
        argv = sys.argv
    prog = os.path.basename(argv[0]) if argv else "spellchecker"
    args = argv[1:]

    if len(args) != 2:
        print("Usage: spellchecker <training-file> <word>", file=sys.stderr)
        print(f"Example: {prog} training.txt tometo", file=sys.stderr)
        return 1

    training_file, word = args

    try:
        contents = read_from_text_file(training_file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Something went wrong reading the file {training_file}: {e}", file=sys.stderr)
        return 1

    speller = FrequencySpeller()
    speller.train(contents)

    print(f"{word} -> {speller.correct(word)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
