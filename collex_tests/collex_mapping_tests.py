import suite
from collex import (
    same_map, same_flat_map, flat_map, map_defined, compact, span_map, zip_with,
    find_map, first_defined, EMPTY_ARRAY, DebugFailure
)
from collex import arrays

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class Node:
    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Node) and self.value == other.value

    def __repr__(self):
        return f"Node({self.value})"


# --- same_map ---

@test("same_map returns the same list when every element maps to itself")
def test_same_map_identity():
    data = [Node(1), Node(2), Node(3)]
    assert_that(same_map(data, lambda x, i: x) is data, "identity mapper must not allocate")


@test("same_map allocates once an element changes")
def test_same_map_changed():
    data = [Node(1), Node(2), Node(3)]
    result = same_map(data, lambda x, i: Node(20) if x.value == 2 else x)
    assert_that(result is not data, "a change should produce a new list")
    assert_that(result == [Node(1), Node(20), Node(3)], f"unexpected result: {result}")
    assert_that(result[0] is data[0] and result[2] is data[2], "unchanged elements are carried over")
    assert_that(data == [Node(1), Node(2), Node(3)], "the input must not be mutated")


@test("same_map compares by identity, not equality")
def test_same_map_equal_but_new():
    data = [Node(1)]
    result = same_map(data, lambda x, i: Node(x.value))
    assert_that(result is not data, "an equal but distinct object counts as a change")


@test("same_map passes indices and handles none and empty inputs")
def test_same_map_edges():
    seen = []
    data = ['a', 'b']
    same_map(data, lambda x, i: seen.append(i) or x)
    assert_that(seen == [0, 1], f"indices should be passed: {seen}")
    assert_that(same_map(None, lambda x, i: x) is None, "none passes through")
    empty = []
    assert_that(same_map(empty, lambda x, i: 1) is empty, "empty passes through")


@test("same_map maps elements after the first change")
def test_same_map_rest():
    data = [1, 2, 3, 4]
    result = same_map(data, lambda x, i: x if i == 0 else x * 100)
    assert_that(result == [1, 200, 300, 400], f"unexpected result: {result}")


# --- same_flat_map ---

@test("same_flat_map returns the same list when nothing changes")
def test_same_flat_map_identity():
    data = [Node(1), Node(2)]
    assert_that(same_flat_map(data, lambda x, i: x) is data, "identity mapper must not allocate")


@test("same_flat_map spreads sequence results")
def test_same_flat_map_expand():
    data = [1, 2, 3]
    result = same_flat_map(data, lambda x, i: [x, x] if x == 2 else x)
    assert_that(result == [1, 2, 2, 3], f"unexpected result: {result}")


@test("same_flat_map treats a one-element list as a change")
def test_same_flat_map_single_list():
    data = [1, 2]
    result = same_flat_map(data, lambda x, i: [x])
    assert_that(result is not data and result == [1, 2], "a list result always allocates")


@test("same_flat_map can drop elements with an empty list")
def test_same_flat_map_drop():
    result = same_flat_map([1, 2, 3], lambda x, i: [] if x == 1 else x)
    assert_that(result == [2, 3], f"unexpected result: {result}")


# --- flat_map family ---

@test("flat_map spreads sequences and skips none")
def test_flat_map():
    result = flat_map([1, 2, 3], lambda x, i: None if x == 2 else [x, -x] if x == 3 else x)
    assert_that(list(result) == [1, 3, -3], f"unexpected result: {result}")


@test("flat_map keeps falsy values and returns the shared empty result")
def test_flat_map_falsy_and_empty():
    assert_that(list(flat_map([0, 1], lambda x, i: x)) == [0, 1], "0 is a value")
    assert_that(flat_map([1, 2], lambda x, i: None) is EMPTY_ARRAY, "nothing produced gives EMPTY_ARRAY")
    assert_that(flat_map(None, lambda x, i: x) is EMPTY_ARRAY, "none input gives EMPTY_ARRAY")


@test("flat_map_to_mutable always returns a fresh list")
def test_flat_map_to_mutable():
    result = arrays.flat_map_to_mutable([], lambda x, i: x)
    assert_that(result == [] and isinstance(result, list), "empty input gives a new empty list")
    assert_that(arrays.flat_map_to_mutable([[1], [2, 3]], lambda x, i: x) == [1, 2, 3], "lists are spread")


@test("flatten mixes values and sequences")
def test_flatten():
    assert_that(arrays.flatten([1, [2, 3], None, (4,)]) == [1, 2, 3, 4], "one level flattened, none skipped")


@test("map_defined and map_all_or_fail")
def test_map_defined_and_all_or_fail():
    assert_that(map_defined([1, 2, 3], lambda x, i: None if x == 2 else x - 1) == [0, 2], "0 survives")
    assert_that(arrays.map_all_or_fail([1, 2], lambda x, i: x * 2) == [2, 4], "all defined")
    assert_that(arrays.map_all_or_fail([1, 2], lambda x, i: None if x == 2 else x) is None, "one none fails all")


# --- filtering ---

@test("filter returns the same list when every element passes")
def test_filter_identity():
    data = [1, 2, 3]
    assert_that(arrays.filter(data, lambda x: x > 0) is data, "no-op filter must not allocate")
    result = arrays.filter(data, lambda x: x != 2)
    assert_that(result == [1, 3] and result is not data, "removal allocates")
    assert_that(arrays.filter(None, lambda x: True) is None, "none passes through")


@test("filter_mutate filters in place")
def test_filter_mutate():
    data = [1, 2, 3, 4, 5]
    arrays.filter_mutate(data, lambda x, i, arr: x % 2 == 1)
    assert_that(data == [1, 3, 5], f"unexpected list: {data}")


@test("compact removes falsy elements and is a no-op otherwise")
def test_compact():
    data = [1, 'a', True]
    assert_that(compact(data) is data, "nothing falsy means the same list")
    assert_that(compact([0, 1, '', 'a', None, False, 2]) == [1, 'a', 2], "falsy values removed")


# --- span_map ---

@test("span_map groups contiguous runs only")
def test_span_map_contiguity():
    spans = span_map([1, 1, 2, 2, 1], lambda x, i: x, lambda chunk, key, start, end: (chunk, key, start, end))
    expected = [([1, 1], 1, 0, 2), ([2, 2], 2, 2, 4), ([1], 1, 4, 5)]
    assert_that(spans == expected, f"unexpected spans: {spans}")


@test("span_map drops falsy reducer results")
def test_span_map_drop():
    result = span_map(['a', 'b', 'B', 'c'], lambda x, i: x.lower(),
                      lambda chunk, key, start, end: None if key == 'b' else ''.join(chunk))
    assert_that(result == ['a', 'c'], f"the 'b' run should be dropped: {result}")


@test("span_map handles none, empty and single element inputs")
def test_span_map_edges():
    assert_that(span_map(None, lambda x, i: x, lambda *a: a) is None, "none gives none")
    assert_that(span_map([], lambda x, i: x, lambda *a: a) == [], "empty gives empty")
    assert_that(span_map([7], lambda x, i: x, lambda c, k, s, e: (s, e)) == [(0, 1)], "single run")


@test("span_map calls the key function once per element")
def test_span_map_key_calls():
    calls = []
    span_map([1, 1, 2, 3, 3], lambda x, i: calls.append(i) or x, lambda c, k, s, e: c)
    assert_that(calls == [0, 1, 2, 3, 4], f"each index keyed once: {calls}")


@test("get_ranges_where reports maximal runs")
def test_get_ranges_where():
    ranges = []
    arrays.get_ranges_where([0, 1, 1, 0, 1], lambda x: x == 1, lambda s, e: ranges.append((s, e)))
    assert_that(ranges == [(1, 3), (4, 5)], f"unexpected ranges: {ranges}")


# --- pairing and searching ---

@test("zip_with pairs by position and checks lengths")
def test_zip_with():
    assert_that(zip_with([1, 2], [10, 20], lambda a, b, i: a + b + i) == [11, 23], "sum with index")
    assert_that(arrays.zip_to_map(['a', 'b'], [1, 2]) == {'a': 1, 'b': 2}, "zip to dict")
    assert_raises(DebugFailure, zip_with, [1], [1, 2], lambda a, b, i: a)
    assert_raises(DebugFailure, arrays.zip_to_map, ['a'], [])


@test("intersperse and concatenate avoid allocation when possible")
def test_intersperse_concatenate():
    single = [1]
    assert_that(arrays.intersperse(single, 0) is single, "one element is returned as-is")
    assert_that(arrays.intersperse([1, 2, 3], 0) == [1, 0, 2, 0, 3], "separators between elements")
    from collex.growth import concatenate
    a = [1]
    assert_that(concatenate(a, []) is a and concatenate([], a) is a, "empty operand returns the other")
    assert_that(concatenate([1], [2]) == [1, 2], "both non-empty allocates")


@test("first_defined keeps falsy results and find_map fails without a match")
def test_first_defined_find_map():
    assert_that(first_defined([3, 0, 5], lambda x, i: x if x < 1 else None) == 0, "0 is defined")
    assert_that(first_defined(None, lambda x, i: x) is None, "none gives none")
    assert_that(find_map([0, 4, 5], lambda x, i: x) == 4, "first truthy result")
    assert_raises(DebugFailure, find_map, [0, None], lambda x, i: x)


@test("array_is_equal_to compares element-wise")
def test_array_is_equal_to():
    assert_that(arrays.array_is_equal_to([1, 2], (1, 2)), "lists and tuples compare by element")
    assert_that(not arrays.array_is_equal_to([1, 2], [1]), "different lengths")
    assert_that(arrays.array_is_equal_to(None, None) and not arrays.array_is_equal_to([], None), "none handling")


if __name__ == "__main__":
    suite.run(title="collex mapping and span test suite")
