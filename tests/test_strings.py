import pytest

from algokit.strings import (
    almost_equal,
    count_almost_equal_pairs,
    count_k_constraint_substrings,
    count_seniors,
    defang_ip,
    get_lucky,
    is_anagram,
    longest_palindrome,
    min_add_to_make_valid,
    min_length,
    same_square_color,
    score_of_string,
    string_hash,
)


def test_anagram_of_reversal():
    word = "anagram"
    assert is_anagram(word, word[::-1])
    assert is_anagram(word, "".join(sorted(word)))


def test_anagram_rejects_different_counts():
    assert not is_anagram("rat", "car")
    assert not is_anagram("aab", "ab")


def test_anagram_symmetric():
    assert is_anagram("listen", "silent") == is_anagram("silent", "listen")


def test_longest_palindrome_example():
    assert longest_palindrome("abccccdd") == 7


def test_longest_palindrome_of_mirror_uses_everything():
    half = "abcde"
    assert longest_palindrome(half + half[::-1]) == 2 * len(half)
    assert longest_palindrome(half + "z" + half[::-1]) == 2 * len(half) + 1


def test_longest_palindrome_bounded_by_length():
    s = "qwertyqwe"
    assert longest_palindrome(s) <= len(s)


def test_min_add_balanced_is_zero():
    assert min_add_to_make_valid("(())()") == 0


@pytest.mark.parametrize("s", ["(((", ")))", ")(", "))(("])
def test_min_add_all_unmatched(s):
    assert min_add_to_make_valid(s) == len(s)


def test_defang_round_trip():
    address = "255.100.50.0"
    defanged = defang_ip(address)
    assert "." not in defanged.replace("[.]", "")
    assert defanged.replace("[.]", ".") == address
    assert defanged.count("[.]") == address.count(".")


def test_get_lucky_examples():
    assert get_lucky("iiii", 1) == 36
    assert get_lucky("zbax", 2) == 8


def test_get_lucky_converges_to_digit():
    assert get_lucky("leetcode", 10) < 10


def test_get_lucky_rejects_non_letters():
    with pytest.raises(ValueError):
        get_lucky("ab1", 1)


def _record(age):
    return f"7868190130M{age:02d}22"


def test_count_seniors_boundary():
    assert count_seniors([_record(60)]) == 0
    assert count_seniors([_record(61)]) == 1


def test_count_seniors_counts_each_record():
    assert count_seniors([_record(75)] * 4 + [_record(40)] * 3) == 4


def test_min_length_removes_everything():
    assert min_length("AB" * 5) == 0
    assert min_length("CCDD") == 0
    assert min_length("ACDB") == 0


def test_min_length_keeps_unrelated():
    s = "XYZBA"
    assert min_length(s) == len(s)


def test_score_symmetric():
    s = "hello"
    assert score_of_string(s) == score_of_string(s[::-1])


def test_score_constant_string():
    assert score_of_string("aaaa") == 0
    assert score_of_string("") == 0


def test_string_hash_block_one_is_identity():
    assert string_hash("mississippi", 1) == "mississippi"


def test_string_hash_length():
    s = "abcdefghijkl"
    assert len(string_hash(s, 3)) == len(s) // 3
    assert string_hash("a" * 6, 6) == "a"


def test_string_hash_rejects_partial_block():
    with pytest.raises(ValueError):
        string_hash("abcde", 2)


def test_k_constraint_large_k_counts_all():
    s = "1010101"
    n = len(s)
    assert count_k_constraint_substrings(s, n) == n * (n + 1) // 2


def test_k_constraint_uniform_string_counts_all():
    s = "0000"
    n = len(s)
    assert count_k_constraint_substrings(s, 0) == n * (n + 1) // 2


def test_k_constraint_monotone():
    s = "10101"
    counts = [count_k_constraint_substrings(s, k) for k in range(4)]
    assert counts == sorted(counts)


def test_same_square_examples():
    assert same_square_color("a1", "c3")
    assert not same_square_color("a1", "h3")


def test_adjacent_squares_differ():
    assert not same_square_color("a1", "a2")
    assert not same_square_color("d4", "e4")


def test_almost_equal_padding_and_swap():
    assert almost_equal(3, 30)
    assert not almost_equal(12, 30)
    assert almost_equal(123, 123)


def test_almost_equal_symmetric():
    assert almost_equal(30, 3) == almost_equal(3, 30)
    assert almost_equal(21, 12) == almost_equal(12, 21)


def test_count_pairs_example():
    assert count_almost_equal_pairs([3, 12, 30, 17, 21]) == 2


def test_count_pairs_no_matches():
    assert count_almost_equal_pairs([123, 231]) == 0