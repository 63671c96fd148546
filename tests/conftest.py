import pytest

from huffcode import assign_codes, build_tree, count


@pytest.fixture
def abracadabra():
    text = "abracadabra"
    freq = count(text)
    tree = build_tree(freq)
    codes, order = assign_codes(tree, freq)
    return text, freq, tree, codes, order
