from local_eats.normalization.tokens import sort_cuisine_type, split_tokens


def test_split_on_comma_and_slash():
    assert split_tokens("Italian, French/Spanish") == ["Italian", "French", "Spanish"]


def test_split_drops_empty_pieces():
    assert split_tokens(" , / ,") == []
    assert split_tokens("Mission,,Castro/") == ["Mission", "Castro"]


def test_split_keeps_duplicates_and_order():
    assert split_tokens("Thai, Thai/Lao") == ["Thai", "Thai", "Lao"]


def test_split_non_string():
    assert split_tokens(None) == []
    assert split_tokens("") == []


def test_sort_cuisine_type_with_comma():
    assert sort_cuisine_type("Vietnamese, Taiwanese") == "Taiwanese, Vietnamese"


def test_sort_cuisine_type_with_slash():
    assert sort_cuisine_type("Italian/Californian") == "Californian/Italian"


def test_sort_cuisine_type_is_case_insensitive():
    assert sort_cuisine_type("thai, Korean") == "Korean, thai"


def test_sort_cuisine_type_without_separator():
    assert sort_cuisine_type("Thai") == "Thai"
    assert sort_cuisine_type("") == ""
