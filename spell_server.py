from __future__ import annotations
import os
import sys
import threading
from flask import Flask, jsonify, request
from flask_cors import CORS

from spell_corrector import FrequencySpeller
from utils import (
    read_from_text_file,
    is_truthy,
    get_corpus_file,
    get_max_word_length,
    dbg_print,
)

app = Flask(__name__)

# FLASK_MANAGE_CORS controls whether Flask adds CORS headers itself.
#
# Set FLASK_MANAGE_CORS=True in your local .env when running without a
# reverse proxy (e.g. python spell_server.py on port 8003).
#
# Behind nginx the proxy adds Access-Control-Allow-Origin already, and a second
# copy makes browsers reject the response. Leave it unset there.
_flask_manage_cors = is_truthy(os.environ.get("FLASK_MANAGE_CORS", "false"))

if _flask_manage_cors:
    CORS(
        app,
        origins="*",
        send_wildcard=True,
        supports_credentials=False,
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=86400,
        automatic_options=True,
    )
    print("[spell_server] flask_cors applied (FLASK_MANAGE_CORS=True).", file=sys.stderr)
else:
    print("[spell_server] FLASK_MANAGE_CORS is not set, so CORS headers will NOT be added by Flask "
          "(expected in production where nginx handles CORS).", file=sys.stderr)


_SPELLER = None
_SPELLER_LOCK = threading.Lock()


def set_speller(speller: FrequencySpeller | None = None):
    """Replace the speller shared by all requests.

    Args:
        speller: A trained speller. When None, one is trained from the file
            named by SPELL_CORPUS_FILE.

    Raises:
        RuntimeError: if no speller is given and SPELL_CORPUS_FILE is unset.
    """
    global _SPELLER

    if speller is None:
        corpus_file = get_corpus_file()
        if corpus_file is None:
            raise RuntimeError("SPELL_CORPUS_FILE is not set; cannot train the spell server.")
        speller = FrequencySpeller()
        speller.train(read_from_text_file(corpus_file))
        print(f"[spell_server] trained on {corpus_file}: {len(speller)} distinct words.", file=sys.stderr)

    _SPELLER = speller


def get_speller() -> FrequencySpeller:
    if _SPELLER is None:
        # concurrent first requests must not each train the corpus
        with _SPELLER_LOCK:
            if _SPELLER is None:
                set_speller()
    return _SPELLER


@dbg_print
def correct_word(word: str) -> str:
    """Correct a single query word; over-long words come back exactly as sent."""
    query = word.strip().lower()
    if len(query) > get_max_word_length():
        return word
    return get_speller().correct(query)


def _get_field(name: str):
    if request.method == "GET":
        return request.args.get(name)
    json_data = request.get_json(silent=True)
    if not isinstance(json_data, dict):
        json_data = {}
    value = json_data.get(name)
    if value is not None:
        return value
    return request.form.get(name) or request.args.get(name)


@app.route("/", methods=["GET", "POST", "OPTIONS"])
def home():
    # Handle CORS preflight explicitly just in case
    if request.method == "OPTIONS":
        return jsonify({"ok": True}), 200

    word = _get_field("word")
    text = _get_field("text")

    for name, value in (("word", word), ("text", text)):
        if value is not None and not isinstance(value, str):
            return jsonify({"error": f"'{name}' must be a string."}), 400

    if word is not None:
        return jsonify({"word": word, "correction": correct_word(word)})

    if text is not None:
        corrected = get_speller().fix_string(text, max_word_length=get_max_word_length())
        return jsonify({"text": text, "corrected": corrected})

    return jsonify({"error": "Provide a 'word' or 'text' parameter."}), 400


if __name__ == "__main__":
    # Train before serving so the first requests don't race to build it
    set_speller()
    # Bind on all interfaces so a client on a different port can reach it
    app.run(host="0.0.0.0", port=8003, debug=True)
