import pytest

from huffcode import ANY, Alphabet, InvalidSymbolError, count


def test_counts_every_symbol():
    freq = count("abracadabra")
    assert dict(freq) == {"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}


def test_keeps_first_occurrence_order():
    assert list(count("banana")) == ["b", "a", "n"]


def test_rejects_non_ascii():
    with pytest.raises(InvalidSymbolError) as info:
        count("café")
    assert info.value.symbol == "é"
    assert info.value.position == 3


def test_accepts_bytes_in_ascii_range():
    assert count(b"aab") == {97: 2, 98: 1}
    with pytest.raises(InvalidSymbolError):
        count(bytes([65, 200]))


def test_empty_input_gives_empty_mapping():
    assert count("") == {}


def test_charset_alphabet():
    digits = Alphabet.from_charset("0123456789")
    assert count("1121", digits) == {"1": 3, "2": 1}
    with pytest.raises(InvalidSymbolError):
        count("12a", digits)


def test_any_alphabet_accepts_everything():
    assert count("éé", ANY) == {"é": 2}


def test_alphabet_from_config():
    assert Alphabet.from_config({}).name == "ascii"
    assert Alphabet.from_config({"name": "any"}).name == "any"
    abc = Alphabet.from_config({"name": "charset", "charset": "abc"})
    assert abc.accepts("a") and not abc.accepts("d")
    with pytest.raises(ValueError):
        Alphabet.from_config({"name": "charset"})
    with pytest.raises(ValueError):
        Alphabet.from_config({"name": "klingon"})
