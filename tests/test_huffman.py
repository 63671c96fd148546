import random

import pytest
from bitarray import bitarray

from huffcode import (
    HuffmanCompressor, InvalidSymbolError, MalformedStreamError,
    assign_codes, build_tree, count, decode, encode,
)


def _codec(text):
    freq = count(text)
    tree = build_tree(freq)
    codes, _ = assign_codes(tree, freq)
    return tree, codes


def test_abracadabra_round_trip(abracadabra):
    text, freq, tree, codes, _ = abracadabra
    stream = encode(text, codes)
    assert len(stream) < len(text) * 8
    assert len(stream) == sum(freq[s] * len(c) for s, c in codes.items())
    assert "".join(decode(tree, stream)) == text


def test_encoding_concatenates_codes(abracadabra):
    text, _, _, codes, _ = abracadabra
    assert encode(text, codes).to01() == "".join(codes[ch] for ch in text)


def test_single_symbol_round_trip():
    tree, codes = _codec("aaaa")
    stream = encode("aaaa", codes)
    assert stream.to01() == "0000"
    assert decode(tree, stream) == ["a"] * 4


def test_single_character_input():
    tree, codes = _codec("z")
    assert decode(tree, encode("z", codes)) == ["z"]


def test_random_ascii_round_trip():
    rng = random.Random(1234)
    text = "".join(chr(rng.randrange(128)) for _ in range(2000))
    tree, codes = _codec(text)
    assert "".join(decode(tree, encode(text, codes))) == text


def test_decode_accepts_bit_string(abracadabra):
    text, _, tree, codes, _ = abracadabra
    assert "".join(decode(tree, encode(text, codes).to01())) == text


def test_truncated_stream_is_malformed(abracadabra):
    text, _, tree, codes, _ = abracadabra
    stream = encode(text, codes)
    with pytest.raises(MalformedStreamError):
        decode(tree, stream[:-1])


def test_trailing_bits_are_malformed(abracadabra):
    text, _, tree, codes, _ = abracadabra
    stream = encode(text, codes) + bitarray("0")
    with pytest.raises(MalformedStreamError):
        decode(tree, stream)


def test_one_bit_in_single_symbol_stream_is_malformed():
    tree, _ = _codec("aaa")
    with pytest.raises(MalformedStreamError) as info:
        decode(tree, "010")
    assert info.value.position == 1


def test_non_bit_characters_are_malformed(abracadabra):
    _, _, tree, _, _ = abracadabra
    with pytest.raises(MalformedStreamError):
        decode(tree, "01x")


def test_explicit_length(abracadabra):
    text, _, tree, codes, _ = abracadabra
    prefix = text[:4]
    stream = encode(prefix, codes)
    assert "".join(decode(tree, stream, length=4)) == prefix
    assert decode(tree, bitarray(), length=0) == []


def test_unknown_symbol_cannot_be_encoded(abracadabra):
    _, _, _, codes, _ = abracadabra
    with pytest.raises(InvalidSymbolError):
        encode("abz", codes)


def test_compressor_round_trip():
    compressor = HuffmanCompressor()
    compressed, tree = compressor.compress("this is a test")
    assert isinstance(compressed, bitarray)
    assert compressor.decompress(compressed, tree) == "this is a test"


def test_build_codebook_returns_every_stage():
    freq, tree, codes, order = HuffmanCompressor().build_codebook("abracadabra")
    assert freq["a"] == 5
    assert tree.weight == 11
    assert dict(order) == codes
    assert HuffmanCompressor().decompress(encode("abra", codes), tree, length=4) == "abra"
