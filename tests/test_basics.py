import pytest

from rustdrill.drills.basics import (
    Wrapper,
    animal_habitat,
    bigger,
    compose_me,
    foo_if_fizz,
    is_a_color_word,
    is_even,
    maybe_icecream,
    replace_me,
    sale_price,
    trim_me,
    vec_loop,
    vec_map,
)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_equal_numbers():
    assert bigger(42, 42) == 42


@pytest.mark.parametrize(
    "word, expected",
    [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")],
)
def test_foo_if_fizz(word, expected):
    assert foo_if_fizz(word) == expected


@pytest.mark.parametrize(
    "animal, expected",
    [("gopher", "Burrow"), ("snake", "Desert"), ("crab", "Beach"), ("dinosaur", "Unknown")],
)
def test_animal_habitat(animal, expected):
    assert animal_habitat(animal) == expected


def test_is_true_when_even():
    assert is_even(4) is True


def test_is_false_when_odd():
    assert is_even(5) is False


def test_sale_price_even_and_odd():
    assert sale_price(52) == 42
    assert sale_price(51) == 48


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_icecream_raw_value():
    assert maybe_icecream(12) == 5


def test_icecream_rejects_negative_hour():
    with pytest.raises(ValueError):
        maybe_icecream(-1)


def test_color_words():
    assert is_a_color_word("green") is True
    assert is_a_color_word("purple") is False


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"


def test_vec_loop_doubles_in_place():
    values = [2, 4, 6, 8, 10]
    result = vec_loop(values)
    assert result == [4, 8, 12, 16, 20]
    assert values == [4, 8, 12, 16, 20]


def test_vec_map_leaves_input_alone():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_store_int_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"