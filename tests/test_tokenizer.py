from fuzzy_search import Document, Tokenizer


def test_splits_on_non_alphanumeric_and_lowercases():
    tok = Tokenizer()
    assert list(tok.tokenize("Hello, World! C++ 2nd-edition")) == [
        "hello", "world", "c", "2nd", "edition"
    ]


def test_never_produces_empty_tokens():
    tok = Tokenizer()
    assert list(tok.tokenize("")) == []
    assert list(tok.tokenize("  --!!  ,, ")) == []
    assert list(tok.tokenize("...a...b...")) == ["a", "b"]


def test_tokenize_is_lazy_and_restartable():
    tok = Tokenizer()
    gen = tok.tokenize("Clean Code")
    assert iter(gen) is gen
    assert next(gen) == "clean"
    # A fresh call starts over
    assert list(tok.tokenize("Clean Code")) == ["clean", "code"]


def test_unicode_letters_are_alphanumeric():
    tok = Tokenizer()
    assert list(tok.tokenize("Café Müller")) == ["café", "müller"]


def test_normalize_and_fields():
    tok = Tokenizer()
    assert tok.normalize("  The  Clean-Coder ") == "the clean coder"
    assert list(tok.tokenize_fields(["Clean Code", "Robert Martin"])) == [
        "clean", "code", "robert", "martin"
    ]


def test_composite_field_joins_title_author_category():
    doc = Document("1", "Clean Code", "Robert Martin", "Software", 2008)
    assert doc.indexed_text == "Clean Code Robert Martin Software"
    assert list(Tokenizer().tokenize(doc.indexed_text)) == [
        "clean", "code", "robert", "martin", "software"
    ]
