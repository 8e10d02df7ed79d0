"""Disjoint words web application — Flask backend."""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on sys.path so `src.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from src.constants import COMBINATION_LENGTH, WORD_LENGTH
from src.display import sort_combinations
from src.solver import SearchTimeout, search
from src.words import WordList, build_word_list, load_word_list

app = Flask(__name__)

# Used when a request does not send its own word list
DEFAULT_WORDS_PATH = Path(_project_root) / "data" / "words.txt"

# Default word list for WORD_LENGTH, loaded on first use
WORD_LISTS: dict[int, WordList] = {}


def _default_word_list(word_length: int) -> WordList | None:
    if not DEFAULT_WORDS_PATH.exists():
        return None
    # Other lengths are read per request so the cache holds one list
    if word_length != WORD_LENGTH:
        return load_word_list(DEFAULT_WORDS_PATH, length=word_length)
    if word_length not in WORD_LISTS:
        WORD_LISTS[word_length] = load_word_list(DEFAULT_WORDS_PATH, length=word_length)
    return WORD_LISTS[word_length]


def _positive_int(data: dict, key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"'{key}' must be a positive integer")
    return value


@app.route("/search", methods=["POST"])
def search_route():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    try:
        count = _positive_int(data, "count", COMBINATION_LENGTH)
        word_length = _positive_int(data, "word_length", WORD_LENGTH)
        timeout = float(data.get("timeout", 60))
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    words = data.get("words")
    if words is None:
        word_list = _default_word_list(word_length)
        if word_list is None:
            return jsonify({"error": "No words provided"}), 400
    elif isinstance(words, list) and all(isinstance(w, str) for w in words):
        word_list = build_word_list(words, length=word_length)
    else:
        return jsonify({"error": "'words' must be a list of strings"}), 400

    try:
        # Searched in-process so request handling never forks
        combinations = search(word_list, length=count, workers=1, timeout=timeout)
    except SearchTimeout:
        return jsonify({"error": "Search timed out"}), 200
    except Exception as e:
        return jsonify({"error": f"Search error: {e}"}), 500

    return jsonify({
        "word_count": len(word_list),
        "combinations": [
            word_list.originals(c) for c in sort_combinations(word_list, combinations)
        ],
    })


if __name__ == "__main__":
    print(f"Default word list: {DEFAULT_WORDS_PATH}")
    app.run(debug=True, host="0.0.0.0", port=8080)
