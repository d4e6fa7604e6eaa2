from pagediff.core import TextToken, tokenize


def test_tokenize_records_offsets():
    tokens = tokenize("  the  cat\tsat\n")
    assert tokens == [
        TextToken("the", 2, 5),
        TextToken("cat", 7, 10),
        TextToken("sat", 11, 14),
    ]


def test_tokenize_empty_and_blank():
    assert tokenize("") == []
    assert tokenize(" \n\t ") == []


def test_tokens_slice_back_to_source():
    text = "Total: 1,234.00 EUR (net)"
    for token in tokenize(text):
        assert text[token.start : token.end] == token.value


def test_byte_order_mark_separates_tokens():
    assert [t.value for t in tokenize("a\ufeffb")] == ["a", "b"]
    assert [t.value for t in tokenize("a\u00a0b\u3000c")] == ["a", "b", "c"]


def test_information_separators_stay_inside_tokens():
    assert [t.value for t in tokenize("a\x1cb\x1fc d")] == ["a\x1cb\x1fc", "d"]
