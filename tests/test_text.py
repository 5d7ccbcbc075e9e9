from starterbox.text import swap_ascii_case


def test_swap_example():
    assert swap_ascii_case("Hello, World!") == "hELLO, wORLD!"


def test_round_trip():
    text = "MiXeD cAsE 123 !?"
    assert swap_ascii_case(swap_ascii_case(text)) == text


def test_non_ascii_untouched():
    assert swap_ascii_case("éß") == "éß"


def test_only_letters_change():
    text = "0123456789 -_=+[]"
    assert swap_ascii_case(text) == text