from difflib import SequenceMatcher

from fuzzscore.matcher import MatchingBlock, find_longest_match, get_matching_blocks


def test_longest_match_prefers_longest_run():
    assert find_longest_match("abxcd", "abcd", 0, 5, 0, 4) == MatchingBlock(0, 0, 2)


def test_longest_match_tie_earliest_in_a():
    # "ab" occurs twice in a; the first occurrence wins
    assert find_longest_match("abab", "ab", 0, 4, 0, 2) == MatchingBlock(0, 0, 2)


def test_longest_match_tie_earliest_in_b():
    assert find_longest_match("a", "aa", 0, 1, 0, 2) == MatchingBlock(0, 0, 1)


def test_longest_match_respects_ranges():
    assert find_longest_match("abcab", "ab", 2, 5, 0, 2) == MatchingBlock(3, 0, 2)


def test_no_match_is_zero_length_at_range_start():
    assert find_longest_match("abc", "xyz", 1, 3, 2, 3) == MatchingBlock(1, 2, 0)


def test_blocks_decompose_left_and_right():
    assert get_matching_blocks("abxcd", "abcd") == [(0, 0, 2), (3, 2, 2)]


def test_blocks_empty_inputs():
    assert get_matching_blocks("", "") == []
    assert get_matching_blocks("abc", "") == []
    assert get_matching_blocks("abc", "xyz") == []


def test_blocks_over_token_sequences():
    assert get_matching_blocks(["new", "york"], ["york", "new"]) == [(0, 1, 1)]


def test_blocks_ordered_and_non_overlapping():
    a = "the quick brown fox jumps over the lazy dog"
    b = "a quick brown dog jumps over the lazy fox"
    blocks = get_matching_blocks(a, b)
    assert blocks
    for prev, cur in zip(blocks, blocks[1:]):
        assert prev.a + prev.size <= cur.a
        assert prev.b + prev.size <= cur.b
    for blk in blocks:
        assert a[blk.a:blk.a + blk.size] == b[blk.b:blk.b + blk.size]


def test_matched_total_agrees_with_difflib():
    pairs = [
        ("new york mets", "new YORK mets"),
        ("the wonderful new york mets", "new york mets vs atlanta braves"),
        ("cirque du soleil - zarkana - las vegas", "zarakana - cirque du soleil - bellagio"),
    ]
    for a, b in pairs:
        ours = sum(blk.size for blk in get_matching_blocks(a, b))
        theirs = sum(
            blk.size for blk in SequenceMatcher(None, a, b, autojunk=False).get_matching_blocks()
        )
        assert ours == theirs
