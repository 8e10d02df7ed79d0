"""Tests for the Flask search endpoint."""

from __future__ import annotations

import pytest

from web.app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


class TestSearchRoute:
    def test_finds_combination(self, client, five_disjoint_lines) -> None:
        resp = client.post("/search", json={"words": five_disjoint_lines})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["word_count"] == 5
        assert body["combinations"] == [["abcde", "fghij", "klmno", "pqrst", "uvwxy"]]

    def test_anagrams_collapsed(self, client) -> None:
        resp = client.post("/search", json={"words": ["abcde", "edcba"], "count": 1})
        body = resp.get_json()
        assert body["word_count"] == 1
        assert body["combinations"] == [["abcde"]]

    def test_shared_letter(self, client) -> None:
        resp = client.post("/search", json={"words": ["abcde", "fghia"], "count": 2})
        assert resp.get_json()["combinations"] == []

    def test_word_length(self, client) -> None:
        resp = client.post("/search", json={
            "words": ["cab", "fed", "bad"], "count": 2, "word_length": 3,
        })
        assert resp.get_json()["combinations"] == [["cab", "fed"]]

    @pytest.mark.parametrize("payload", [
        {"words": ["abcde"], "count": 0},
        {"words": ["abcde"], "count": "five"},
        {"words": ["abcde"], "word_length": True},
        {"words": "abcde"},
        {"words": ["abcde", 5]},
        {"words": ["abcde"], "timeout": "soon"},
        ["abcde"],
        "abcde",
    ])
    def test_bad_request(self, client, payload) -> None:
        resp = client.post("/search", json=payload)
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_no_words_and_no_default(self, client, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr("web.app.DEFAULT_WORDS_PATH", tmp_path / "missing.txt")
        monkeypatch.setattr("web.app.WORD_LISTS", {})
        resp = client.post("/search", json={})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "No words provided"

    def test_default_word_list(self, client, monkeypatch, tmp_path) -> None:
        path = tmp_path / "words.txt"
        path.write_text("abcde\nfghij\n", encoding="utf-8")
        monkeypatch.setattr("web.app.DEFAULT_WORDS_PATH", path)
        monkeypatch.setattr("web.app.WORD_LISTS", {})
        resp = client.post("/search", json={"count": 2})
        assert resp.get_json()["combinations"] == [["abcde", "fghij"]]

    def test_timeout(self, client, five_disjoint_lines) -> None:
        resp = client.post("/search", json={"words": five_disjoint_lines, "timeout": -1})
        assert resp.status_code == 200
        assert resp.get_json()["error"] == "Search timed out"

    def test_only_default_length_cached(self, client, monkeypatch, tmp_path) -> None:
        path = tmp_path / "words.txt"
        path.write_text("abcde\nfghij\ncab\nfed\n", encoding="utf-8")
        monkeypatch.setattr("web.app.DEFAULT_WORDS_PATH", path)
        cache: dict = {}
        monkeypatch.setattr("web.app.WORD_LISTS", cache)
        for word_length in (3, 4, 6, 7):
            client.post("/search", json={"count": 2, "word_length": word_length})
        resp = client.post("/search", json={"count": 2, "word_length": 3})
        assert resp.get_json()["combinations"] == [["cab", "fed"]]
        client.post("/search", json={"count": 2})
        assert list(cache) == [5]
