"""Tests for text segmentation, keyword scoring and name extraction"""

import pytest

from storyscope.parser import (
    TextSegmenter,
    count_present,
    family_score,
    clamp01,
    count_names,
    unique_names,
)


def test_split_sentences():
    """Sentences are trimmed and empty pieces dropped"""
    segmenter = TextSegmenter()
    sentences = segmenter.split("  First one.  Second one!! Third?...  ")

    assert sentences == ["First one", "Second one", "Third"]


def test_split_blank_text():
    segmenter = TextSegmenter()
    assert segmenter.split("") == []
    assert segmenter.split(" . ! ? ") == []


def test_boundary_rounds_down():
    assert TextSegmenter.boundary(10, 0.25) == 2
    assert TextSegmenter.boundary(0, 0.75) == 0
    assert TextSegmenter.boundary(7, 1.0) == 7


def test_window_is_clipped():
    sentences = ["a", "b", "c", "d", "e"]
    assert TextSegmenter.window(sentences, 0) == ["a", "b"]
    assert TextSegmenter.window(sentences, 2) == ["a", "b", "c", "d"]
    assert TextSegmenter.window(sentences, 5) == ["d", "e"]
    assert TextSegmenter.window([], 0) == []


def test_count_present_ignores_repeats():
    """A keyword counts once no matter how often it occurs"""
    assert count_present("fight fight fight", ["fight", "run"]) == 1


def test_family_score():
    assert family_score("nothing here", ["a1", "b1"], 0.2) == pytest.approx(0.2)
    assert family_score("a1 b1", ["a1", "b1"], 0.2) == 1.0
    assert family_score("anything", [], 0.3) == pytest.approx(0.3)


def test_clamp01():
    assert clamp01(-0.5) == 0.0
    assert clamp01(1.7) == 1.0
    assert clamp01(0.4) == 0.4


def test_count_names_first_appearance_order():
    """Names are counted in order of first appearance"""
    text = "Tom Hale arrived. Anna Reed waved at Tom Hale. Anna Reed smiled. Anna Reed left."
    counts = count_names(text)

    assert list(counts) == ["Tom Hale", "Anna Reed"]
    assert counts["Anna Reed"] == 3
    assert counts["Tom Hale"] == 2


def test_unique_names_limit():
    text = "Ann Lee met Bob Ray, Cal Fox and Dee Moe."
    assert unique_names(text) == ["Ann Lee", "Bob Ray", "Cal Fox"]
    assert unique_names(text, limit=1) == ["Ann Lee"]
    assert unique_names("no names at all") == []
