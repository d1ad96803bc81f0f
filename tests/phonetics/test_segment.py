"""Tests for greedy longest-match segmentation."""

from shiksha.phonetics.harvard_kyoto import harvard_kyoto
from shiksha.phonetics.segment import match_at, segment
from shiksha.phonetics.table import PhonemeTable
from shiksha.types import PhoneticUnit, Pitch, UnmatchedCharacter, VowelDuration


def _table(*keys: str) -> PhonemeTable:
    units = []
    for key in keys:
        if key[0] in "aeiouAIU":
            units.append(PhoneticUnit(key, key, "U+0905", pitch=Pitch.HIGH,
                                      duration=VowelDuration.SHORT))
        else:
            units.append(PhoneticUnit(key, key, "U+0915"))
    return PhonemeTable(units)


def _keys(tokens) -> list[str]:
    return [t.key for t in tokens]


class TestLongestMatch:
    def test_two_char_beats_one_char(self):
        table = _table("k", "h", "kh", "a")
        assert _keys(segment("kha", table)) == ["kh", "a"]

    def test_three_char_beats_two_char(self):
        table = _table("l", "lR", "lRR", "a")
        assert _keys(segment("lRRa", table)) == ["lRR", "a"]

    def test_diphthong_over_vowel(self):
        table = _table("a", "ai", "i")
        assert _keys(segment("ai", table)) == ["ai"]

    def test_no_backtracking(self):
        # "ab" then "c" is unmatched even though "a" + "bc" would cover it
        table = _table("ab", "a", "bc")
        tokens = list(segment("abc", table))
        assert _keys(tokens) == ["ab", "c"]
        assert isinstance(tokens[1], UnmatchedCharacter)

    def test_window_past_end_skipped(self):
        table = _table("k", "kha")
        assert _keys(segment("kh", table)) == ["k", "h"]

    def test_match_at_reports_length(self):
        table = _table("k", "kh")
        token, consumed = match_at("kha", 0, table)
        assert token.key == "kh"
        assert consumed == 2


class TestUnmatched:
    def test_unknown_character_passthrough(self):
        table = _table("k", "a")
        tokens = list(segment("ka?ka", table))
        assert _keys(tokens) == ["k", "a", "?", "k", "a"]
        assert tokens[2] == UnmatchedCharacter("?")

    def test_each_unknown_character_is_one_token(self):
        table = _table("a")
        tokens = list(segment("xy", table))
        assert tokens == [UnmatchedCharacter("x"), UnmatchedCharacter("y")]

    def test_empty_input(self):
        assert list(segment("", _table("a"))) == []


class TestSegmentation:
    def test_restartable(self):
        seg = segment("kha", _table("k", "kh", "a"))
        assert list(seg) == list(seg)

    def test_deterministic(self):
        table = harvard_kyoto()
        text = "dharmakSetre kurukSetre"
        assert list(segment(text, table)) == list(segment(text, table))

    def test_harvard_kyoto_word(self):
        tokens = list(segment("kRSNa", harvard_kyoto()))
        assert _keys(tokens) == ["k", "R", "S", "N", "a"]

    def test_prolonged_vowel(self):
        tokens = list(segment("ai3", harvard_kyoto()))
        assert _keys(tokens) == ["ai3"]
        assert tokens[0].duration is VowelDuration.PROLONGED
