import numpy as np
import suite
from dgen import from_schema, generator
from collex import (
    deduplicate, deduplicate_sorted, sort_and_deduplicate, compare_values, equate_values,
    compare_strings_case_insensitive, equate_strings_case_insensitive, Comparison,
    DebugFailure, EMPTY_ARRAY
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 6}),
    'name': 'word',
    'city': {'_qen_provider': 'choice', 'from': ['ny', 'la', 'chi']},
}


def by_id(a, b):
    return compare_values(a['id'], b['id'])


def same_id(a, b):
    return a['id'] == b['id']


# --- deduplicate ---

@test("deduplicate keeps first occurrences in original order")
def test_deduplicate_basic():
    result = deduplicate([3, 1, 3, 2, 1, 4])
    assert_that(result == [3, 1, 2, 4], f"unexpected dedup: {result}")


@test("deduplicate relational path matches equality path")
def test_deduplicate_relational_matches():
    data = [3, 1, 3, 2, 1, 4, 10, 9, 10]
    plain = deduplicate(data, equate_values)
    relational = deduplicate(data, equate_values, compare_values)
    assert_that(relational == plain == [3, 1, 2, 4, 10, 9], f"paths disagree: {plain} vs {relational}")


@test("deduplicate relational path keeps the first-seen duplicate")
def test_deduplicate_relational_first_wins():
    data = ['b', 'A', 'a', 'B', 'c']
    result = deduplicate(data, equate_strings_case_insensitive, compare_strings_case_insensitive)
    assert_that(result == ['b', 'A', 'c'], f"first occurrence should win: {result}")
    assert_that(result[0] is data[0] and result[1] is data[1], "survivors should be the original objects")


@test("deduplicate handles empty and single element inputs")
def test_deduplicate_trivial():
    assert_that(deduplicate([]) == [], "empty stays empty")
    single = [7]
    result = deduplicate(single, equate_values, compare_values)
    assert_that(result == [7] and result is not single, "single element input is copied")


@test("deduplicate accepts tuples and returns a list")
def test_deduplicate_tuple():
    assert_that(deduplicate((1, 1, 2)) == [1, 2], "tuples are read-only inputs")


@test("deduplicate by key with generated records")
def test_deduplicate_records():
    people = from_schema(person_schema, seed=42).take(40).to.list()
    plain = deduplicate(people, same_id)
    relational = deduplicate(people, same_id, by_id)
    ids = [p['id'] for p in plain]
    assert_that(len(ids) == len(set(ids)), "each id should appear once")
    assert_that([p['id'] for p in relational] == ids, "both paths should agree on order")
    first_seen = []
    for p in people:
        if p['id'] not in first_seen:
            first_seen.append(p['id'])
    assert_that(ids == first_seen, f"order should follow first appearance: {ids} vs {first_seen}")


@test("deduplicate paths agree on random integer inputs")
def test_deduplicate_random_agreement():
    gen = generator(seed=7)
    for size in (2, 5, 30, 200):
        data = gen.integers(size, 0, 12)
        plain = deduplicate(data)
        relational = deduplicate(data, equate_values, compare_values)
        assert_that(plain == relational, f"paths disagree for {data}")
        assert_that(plain == list(dict.fromkeys(data)), f"unexpected result for {data}")


@test("deduplicate is idempotent")
def test_deduplicate_idempotent():
    gen = generator(seed=11)
    data = gen.words(60)
    once = deduplicate(data, equate_values, compare_values)
    assert_that(deduplicate(once, equate_values, compare_values) == once, "second pass should change nothing")
    assert_that(deduplicate(deduplicate(data)) == deduplicate(data), "equality path too")


# --- deduplicate_sorted ---

@test("deduplicate_sorted with an ordering comparer")
def test_deduplicate_sorted_comparer():
    result = deduplicate_sorted([1, 1, 2, 3, 3, 3, 4], compare_values)
    assert_that(result == [1, 2, 3, 4], f"unexpected result: {result}")


@test("deduplicate_sorted with an equality comparer")
def test_deduplicate_sorted_equality():
    result = deduplicate_sorted([1, 1, 2, 2, 5], equate_values)
    assert_that(result == [1, 2, 5], f"unexpected result: {result}")


@test("deduplicate_sorted does not confuse booleans with comparison results")
def test_deduplicate_sorted_bool_vs_comparison():
    # False from an equality comparer means "different", not EQUAL_TO
    result = deduplicate_sorted([1, 2, 3], lambda a, b: False)
    assert_that(result == [1, 2, 3], f"False must keep the element: {result}")
    # True means duplicate, even though True == GREATER_THAN numerically
    result = deduplicate_sorted([1, 2, 3], lambda a, b: True)
    assert_that(result == [1], f"True must drop the element: {result}")


@test("deduplicate_sorted compares against the last kept element")
def test_deduplicate_sorted_last_kept():
    # within 1 of the last kept value counts as a duplicate
    result = deduplicate_sorted([1, 2, 3, 4, 6], lambda a, b: abs(a - b) <= 1)
    assert_that(result == [1, 3, 6], f"unexpected result: {result}")


@test("deduplicate_sorted fails on unsorted input")
def test_deduplicate_sorted_unsorted():
    assert_raises(DebugFailure, deduplicate_sorted, [1, 3, 2], compare_values)


@test("deduplicate_sorted returns the shared empty result for empty input")
def test_deduplicate_sorted_empty():
    assert_that(deduplicate_sorted([], compare_values) is EMPTY_ARRAY, "should reuse the shared empty tuple")


# --- sort_and_deduplicate ---

@test("sort_and_deduplicate sorts then dedups")
def test_sort_and_deduplicate_basic():
    result = sort_and_deduplicate([5, 1, 4, 1, 5, 9, 2, 6, 5])
    assert_that(list(result) == [1, 2, 4, 5, 6, 9], f"unexpected result: {result}")


@test("sort_and_deduplicate numpy fast path returns native python numbers")
def test_sort_and_deduplicate_native_types():
    result = sort_and_deduplicate([3, 1, 2, 3])
    assert_that(all(type(x) is int for x in result), f"should be python ints: {[type(x) for x in result]}")
    floats = sort_and_deduplicate([2.5, 0.5, 2.5])
    assert_that(floats == [0.5, 2.5] and all(type(x) is float for x in floats), f"unexpected floats: {floats}")


@test("sort_and_deduplicate does not merge ints and floats or bools")
def test_sort_and_deduplicate_mixed():
    result = sort_and_deduplicate([2, 1.5, 1])
    assert_that(result == [1, 1.5, 2], f"mixed numbers use the generic path: {result}")
    assert_that(type(result[0]) is int, "ints keep their type")


@test("sort_and_deduplicate on strings with a comparer")
def test_sort_and_deduplicate_strings():
    result = sort_and_deduplicate(['b', 'a', 'c', 'a'], compare_values)
    assert_that(list(result) == ['a', 'b', 'c'], f"unexpected result: {result}")


@test("sort_and_deduplicate defaults to exact equality after sorting")
def test_sort_and_deduplicate_default_equality():
    # case-insensitive sort brings 'a' and 'A' together, but exact equality keeps both
    result = sort_and_deduplicate(['b', 'a', 'A', 'a'], compare_strings_case_insensitive)
    assert_that(list(result) == ['a', 'A', 'a', 'b'], f"only adjacent exact duplicates are dropped: {result}")


@test("sort_and_deduplicate with matching equality drops case variants")
def test_sort_and_deduplicate_custom_equality():
    result = sort_and_deduplicate(['b', 'a', 'A', 'B'], compare_strings_case_insensitive,
                                  equate_strings_case_insensitive)
    assert_that(list(result) == ['a', 'b'], f"first of each case-insensitive run survives: {result}")


@test("sort_and_deduplicate matches deduplicate on random data")
def test_sort_and_deduplicate_random():
    gen = generator(seed=3)
    data = gen.integers(150, -20, 20)
    expected = sorted(set(data))
    assert_that(list(sort_and_deduplicate(data)) == expected, "numpy path should match set semantics")
    generic = sort_and_deduplicate(data, compare_values)
    assert_that(list(generic) == expected, "generic path should match set semantics")
    assert_that(sorted(deduplicate(data)) == expected, "same survivors as unsorted dedup")


@test("deduplicate_sorted treats numpy boolean results as equality")
def test_deduplicate_sorted_numpy_scalars():
    data = [np.int64(1), np.int64(2), np.int64(2), np.int64(3)]
    result = deduplicate_sorted(data, lambda a, b: a == b)
    assert_that(list(result) == [1, 2, 3], f"np.bool_ results must not read as comparisons: {result}")
    assert_that(list(deduplicate_sorted(data, equate_values)) == [1, 2, 3], "default equality on numpy scalars")
    assert_that(list(sort_and_deduplicate([np.int64(3), np.int64(1), np.int64(3), np.int64(2)])) == [1, 2, 3],
                "sort_and_deduplicate keeps every distinct numpy scalar")


if __name__ == "__main__":
    suite.run(title="collex deduplication test suite")
