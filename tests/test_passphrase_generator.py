"""Tests for the passphrase engine and word lists."""

import re

import pytest

from passforge.errors import InvalidPolicy
from passforge.utils.passphrase_generator import PassphrasePolicy, generate_passphrase
from passforge.utils.wordlists import WORD_LISTS, get_word_list, list_ids


def test_four_capitalized_words_with_suffix():
    policy = PassphrasePolicy(
        word_count=4,
        list_id="common",
        separator="-",
        capitalize=True,
        number_placement="suffix",
    )
    pattern = re.compile(r"^[A-Z][a-z]+(-[A-Z][a-z]+){3}-\d{1,3}$")

    for _ in range(200):
        assert pattern.match(generate_passphrase(policy).value)


def test_prefix_number():
    policy = PassphrasePolicy(word_count=3, list_id="memorable", separator="_",
                              capitalize=False, number_placement="prefix")
    value = generate_passphrase(policy).value
    assert re.fullmatch(r"\d{1,3}(_[a-z]+){3}", value)


def test_no_numbers():
    policy = PassphrasePolicy(word_count=5, list_id="technical", separator=".",
                              capitalize=False, number_placement="none")
    words = generate_passphrase(policy).value.split(".")
    assert len(words) == 5
    assert all(w in WORD_LISTS["technical"] for w in words)


def test_between_draws_one_digit_per_boundary(fake_source):
    # three word draws, then one digit per boundary
    source = fake_source([0, 3, 1, 7, 2])
    policy = PassphrasePolicy(word_count=3, list_id="memorable", separator="-",
                              capitalize=True, number_placement="between")

    value = generate_passphrase(policy, source).value

    words = WORD_LISTS["memorable"]
    assert value == f"{words[0].capitalize()}-7-{words[3].capitalize()}-2-{words[1].capitalize()}"
    assert source.calls == [len(words)] * 3 + [10, 10]


def test_empty_separator_gives_single_token():
    policy = PassphrasePolicy(word_count=4, separator="", number_placement="between")
    value = generate_passphrase(policy).value
    assert " " not in value and "-" not in value
    assert re.fullmatch(r"([A-Z][a-z]+\d){3}[A-Z][a-z]+", value)


def test_duplicate_words_are_allowed(fake_source):
    policy = PassphrasePolicy(word_count=3, list_id="common", separator=" ",
                              capitalize=False, number_placement="none")
    value = generate_passphrase(policy, fake_source([5])).value
    word = WORD_LISTS["common"][5]
    assert value == f"{word} {word} {word}"


def test_suffix_number_uses_secure_source(fake_source):
    source = fake_source([0, 0, 999])
    policy = PassphrasePolicy(word_count=2, number_placement="suffix")
    assert generate_passphrase(policy, source).value.endswith("-999")
    assert source.calls[-1] == 1000


@pytest.mark.parametrize("kwargs", [
    {"number_placement": "middle"},
    {"separator": "+"},
    {"list_id": "klingon"},
    {"word_count": 1},
    {"word_count": 9},
])
def test_invalid_policy(kwargs):
    with pytest.raises(InvalidPolicy):
        PassphrasePolicy(**kwargs)


def test_word_lists_are_lowercase_and_immutable():
    assert list_ids() == ("common", "memorable", "technical")
    for list_id in list_ids():
        words = get_word_list(list_id)
        assert isinstance(words, tuple)
        assert all(w.isalpha() and w.islower() for w in words)


def test_word_list_sizes():
    assert len(get_word_list("common")) >= 200
    assert len(get_word_list("memorable")) == 50
    assert len(get_word_list("technical")) >= 80


def test_unknown_word_list():
    with pytest.raises(InvalidPolicy):
        get_word_list("klingon")
