from itertools import permutations
from math import factorial, isclose

import hypothesis.strategies as st
from hypothesis import assume, given

from aabel import (
    CountedBag, Permutations, cosine, euclid, hamming, jaccard, manhattan,
    shingles
)

keys = st.sampled_from("abcdefgh")
bags = st.builds(
    CountedBag.from_pairs,
    st.lists(st.tuples(keys, st.integers(min_value=1, max_value=20)), max_size=10),
)
floats = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


@st.composite
def vector_pairs(draw):
    n = draw(st.integers(min_value=0, max_value=20))
    xs = draw(st.lists(floats, min_size=n, max_size=n))
    ys = draw(st.lists(floats, min_size=n, max_size=n))
    return xs, ys


@given(bags, bags)
def test_intersection_symmetric(a, b):
    assert dict(a.intersection(b)) == dict(b.intersection(a))
    assert len(list(a.intersection(b))) == len(a.keys() & b.keys())


@given(bags, bags)
def test_intersection_min_counts(a, b):
    for key, count in a.intersection(b):
        assert count == min(a[key], b[key])
    assert a.common(b).total() == sum(c for _, c in a.intersection(b))


@given(bags)
def test_intersection_self(a):
    assert dict(a.intersection(a)) == dict(a)


@given(st.lists(keys))
def test_from_keys_total(xs):
    bag = CountedBag.from_keys(xs)
    assert bag.total() == len(xs)
    assert all(count >= 1 for count in bag.values())


@given(st.lists(st.integers(), min_size=1, max_size=30), st.data())
def test_shingles_count(source, data):
    size = data.draw(st.integers(min_value=1, max_value=len(source)))
    windows = list(shingles(source, size))
    assert len(windows) == len(source) - size + 1
    for i, window in enumerate(windows):
        assert window == source[i:i + size]


@given(st.integers(min_value=0, max_value=6))
def test_permutations_count(n):
    buffer = list(range(n))
    res = Permutations(n, buffer).generate()
    assert len(res) == factorial(n)
    assert set(res) == set(permutations(range(n)))


@given(vector_pairs())
def test_euclid_manhattan(pair):
    xs, ys = pair
    assert euclid(xs, ys) >= 0.0
    assert euclid(xs, ys) <= manhattan(xs, ys) * (1 + 1e-9) + 1e-9
    assert euclid(xs, ys) == euclid(xs, ys)
    assert manhattan(xs, ys) == manhattan(ys, xs)


@given(st.lists(floats, min_size=1))
def test_self_distance(xs):
    assert euclid(xs, xs) == 0.0
    assert manhattan(xs, xs) == 0.0
    assert hamming(xs, xs) == 0
    assume(any(abs(x) > 1e-3 for x in xs))
    assert isclose(cosine(xs, xs), 1.0)


@given(st.lists(keys), st.lists(keys))
def test_jaccard_bounds(xs, ys):
    value = jaccard(xs, ys)
    assert 0.0 <= value <= 0.5
    assert value == jaccard(ys, xs)
