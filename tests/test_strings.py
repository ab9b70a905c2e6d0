import pytest

from arraykit.strings import is_palindrome, reverse_words


def test_reverse_words_example():
    assert reverse_words("the sky is blue") == "blue is sky the"


def test_reverse_words_trims_and_collapses_spaces():
    assert reverse_words("  hello   world  ") == "world hello"


def test_reverse_words_only_spaces_separate():
    assert reverse_words("a\tb c") == "c a\tb"


def test_reverse_words_single_word():
    assert reverse_words("  single  ") == "single"


@pytest.mark.parametrize("text", ["one two three", "x", "alpha  beta gamma delta"])
def test_reverse_words_twice_normalises(text):
    once = reverse_words(text)
    assert reverse_words(once) == " ".join(text.split())
    assert once.split(" ") == list(reversed(text.split()))


@pytest.mark.parametrize("text", ["", "   "])
def test_reverse_words_without_words(text):
    with pytest.raises(ValueError):
        reverse_words(text)


def test_is_palindrome_examples():
    assert is_palindrome("A man, a plan, a canal: Panama")
    assert not is_palindrome("race a car")
    assert is_palindrome(" ")


def test_is_palindrome_digits_and_letters():
    assert not is_palindrome("0P")
    assert is_palindrome("1a2A1")


def test_is_palindrome_empty():
    assert is_palindrome("")


def test_is_palindrome_ignores_non_ascii():
    assert is_palindrome("ab\u00e9ba")
    assert is_palindrome("\u00e9")


@pytest.mark.parametrize("text", ["abc", "Hello, World", "x1y2", "No lemon"])
def test_is_palindrome_mirror_always_true(text):
    assert is_palindrome(text + text[::-1])
    assert is_palindrome(text) == is_palindrome(text[::-1])