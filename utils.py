import os
from functools import wraps
from dotenv import load_dotenv

load_dotenv()

_DEFAULT_MAX_WORD_LENGTH = 20


def read_from_text_file(file):
    """
    Read the text file as a string
    """
    with open(file, "r", encoding="utf-8") as f:
        contents = f.read()
    return contents


def is_truthy(value) -> bool:
    """Return True for the usual "on" spellings of an environment flag."""
    return (value or "").strip().lower() in ("1", "true", "yes")


def is_debug_enabled() -> bool:
    return is_truthy(os.getenv("DEBUG"))


def get_corpus_file():
    """Path of the training corpus, from SPELL_CORPUS_FILE, or None when unset."""
    corpus_file = (os.getenv("SPELL_CORPUS_FILE") or "").strip()
    return corpus_file or None


def get_max_word_length() -> int:
    """
    Longest word the front ends will try to correct.

    Read from SPELL_MAX_WORD_LENGTH; missing, non-numeric or non-positive
    values fall back to the default.
    """
    raw = os.getenv("SPELL_MAX_WORD_LENGTH", "")
    try:
        value = int(raw)
    except ValueError:
        return _DEFAULT_MAX_WORD_LENGTH
    if value <= 0:
        return _DEFAULT_MAX_WORD_LENGTH
    return value


def dbg_print(func):
    """
    A decorator that prints the name of the function being called for debugging purposes.

    Args:
        func: The function to wrap. Tracing is decided once, when the module
            defining *func* is imported.

    Returns:
        The original function when DEBUG is off, otherwise a tracing wrapper.
    """
    if not is_debug_enabled():
        # No-op: return original function
        return func

    @wraps(func)
    def wrapper(*args, **kwargs):
        print(f"[DEBUG] Calling: {func.__name__}")
        return func(*args, **kwargs)

    return wrapper
