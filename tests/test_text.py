from bothn_server.engine.text import build_corpus, normalize, split_words


def test_normalize_lowercases_and_strips_punctuation():
    assert normalize("Xin Chào, Thế Giới! (test)_-") == "xin chào thế giới test"


def test_normalize_keeps_characters_outside_the_set():
    # '?' and '@' are not part of the stripped punctuation
    assert normalize("Gì? @Bạn") == "gì? @bạn"


def test_normalize_empty():
    assert normalize("") == ""


def test_split_words_on_single_spaces():
    assert split_words("một  hai") == ["một", "", "hai"]


def test_build_corpus_filters_short_segments():
    text = "Ngắn. Đây là một câu đủ dài! Câu hỏi thứ hai có dài không?\nx"
    assert build_corpus(text) == [
        " đây là một câu đủ dài",
        " câu hỏi thứ hai có dài không",
    ]


def test_build_corpus_length_boundary():
    # exactly 10 characters is dropped, 11 is kept
    assert build_corpus("abcdefghij.") == []
    assert build_corpus("abcdefghijk.") == ["abcdefghijk"]


def test_build_corpus_splits_on_newlines():
    text = "Dòng thứ nhất rất dài\nDòng thứ hai cũng dài"
    assert build_corpus(text) == ["dòng thứ nhất rất dài", "dòng thứ hai cũng dài"]


def test_build_corpus_empty():
    assert build_corpus("") == []
