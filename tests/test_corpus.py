"""Tests for corpus – loading and shuffling the word list."""

from __future__ import annotations

from importlib.resources import files
import random

import pytest

from ttypetest.corpus import WORD_SRC, CorpusError, load_corpus, shuffled


class TestLoadCorpus:
    def test_one_word_per_line(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\ndog\nowl\n", encoding="utf-8")
        assert load_corpus(path) == ["cat", "dog", "owl"]

    def test_blank_lines_and_whitespace_are_dropped(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("  cat \r\n\n\ndog\n   \n", encoding="utf-8")
        assert load_corpus(path) == ["cat", "dog"]

    def test_missing_file_is_a_corpus_error(self, tmp_path):
        with pytest.raises(CorpusError) as info:
            load_corpus(tmp_path / "nope.txt")
        assert isinstance(info.value.__cause__, FileNotFoundError)

    def test_directory_is_a_corpus_error(self, tmp_path):
        with pytest.raises(CorpusError):
            load_corpus(tmp_path)

    def test_undecodable_file_is_a_corpus_error(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(CorpusError):
            load_corpus(path)

    def test_default_word_list_is_a_package_resource(self):
        assert WORD_SRC == files("ttypetest") / "words.txt"
        assert WORD_SRC.is_file()

    def test_default_word_list_loads(self):
        words = load_corpus()
        assert len(words) >= 30
        assert all(w and " " not in w for w in words)


class TestShuffled:
    def test_shuffles_in_place_with_given_rng(self):
        corpus = [str(i) for i in range(20)]
        expected = list(corpus)
        random.Random(7).shuffle(expected)

        result = shuffled(corpus, random.Random(7))
        assert result is corpus
        assert corpus == expected

    def test_keeps_every_word(self):
        corpus = ["a", "b", "c", "d"]
        shuffled(corpus)
        assert sorted(corpus) == ["a", "b", "c", "d"]
