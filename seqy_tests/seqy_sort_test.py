import suite
from collections import Counter
from datagen import from_schema
from seqy import (
    S, sort_by, sort_by_descending, Comparer, DefaultComparer, FunctionComparer,
    ReverseComparer, DEFAULT, ArgumentNoneError, InvalidArgumentError
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

product_schema = {
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0}),
    'stock': ('pyint', {'min_value': 0, 'max_value': 20}),
}

words = ["bb", "a", "ccc"]


class CaseInsensitive(Comparer[str]):
    def compare(self, x, y):
        a, b = x.lower(), y.lower()
        return (a > b) - (a < b)


# sort_by() tests

@test("sort_by orders by key ascending")
def test_sort_by_basic():
    assert_that(list(sort_by(words, len)) == ["a", "bb", "ccc"], "should sort by length")


@test("sort_by_descending orders by key descending")
def test_sort_by_descending_basic():
    assert_that(list(sort_by_descending(words, len)) == ["ccc", "bb", "a"], "should sort by length, longest first")


@test("sort_by with a custom comparer")
def test_sort_by_custom_comparer():
    result = list(sort_by(["b", "A", "c", "B"], lambda s: s, CaseInsensitive()))
    assert_that(result == ["A", "b", "B", "c"], "should ignore case and keep ties in source order")


@test("sort_by accepts a plain three-way function")
def test_sort_by_function_comparer():
    by_abs = lambda x, y: abs(x) - abs(y)
    assert_that(list(sort_by([3, -1, 2, -4], lambda x: x, by_abs)) == [-1, 2, 3, -4], "should order by magnitude")


@test("adjacent pairs respect the comparer")
def test_sort_by_adjacent_pairs():
    products = from_schema(product_schema, 40, seed=11)
    comparer = DefaultComparer()
    key = lambda p: p['price']

    ascending = sort_by(products, key, comparer).to.list()
    descending = sort_by_descending(products, key, comparer).to.list()

    assert_that(all(comparer.compare(key(a), key(b)) <= 0 for a, b in zip(ascending, ascending[1:])),
                "ascending pairs should compare <= 0")
    assert_that(all(comparer.compare(key(a), key(b)) >= 0 for a, b in zip(descending, descending[1:])),
                "descending pairs should compare >= 0")


@test("sort_by is a permutation of the source")
def test_sort_by_permutation():
    products = from_schema(product_schema, 25, seed=3).to.list()
    ordered = sort_by(products, lambda p: p['stock']).to.list()
    assert_that(Counter(p['name'] for p in ordered) == Counter(p['name'] for p in products),
                "should contain the same elements")


@test("default overload matches an explicit default comparer")
def test_sort_by_default_overload():
    data = [5, 3, 9, 1, 3]
    assert_that(list(sort_by(data, lambda x: x)) == list(sort_by(data, lambda x: x, DefaultComparer())),
                "both forms should agree")


@test("ties keep source order in both directions")
def test_sort_ties_stable():
    data = [("x", 1), ("y", 0), ("z", 1), ("w", 0)]
    key = lambda pair: pair[1]
    assert_that([p[0] for p in sort_by(data, key)] == ["y", "w", "x", "z"], "ascending ties in source order")
    assert_that([p[0] for p in sort_by_descending(data, key)] == ["x", "z", "y", "w"],
                "descending ties in source order")


@test("default comparer puts None keys first")
def test_default_comparer_none():
    result = list(sort_by([3, None, 1], lambda x: x))
    assert_that(result == [None, 1, 3], "None should sort first")
    assert_that(list(sort_by_descending([3, None, 1], lambda x: x)) == [3, 1, None], "None should sort last descending")


@test("sort does not touch the source until traversal")
def test_sort_lazy():
    pulled = []

    def source():
        for x in [3, 1, 2]:
            pulled.append(x)
            yield x

    result = sort_by(source(), lambda x: x)
    assert_that(pulled == [], "source should not be read at call time")
    iterator = iter(result)
    assert_that(next(iterator) == 1, "smallest first")
    assert_that(pulled == [3, 1, 2], "the whole source is buffered on first pull")


@test("sort does not mutate the source")
def test_sort_no_mutation():
    data = [3, 1, 2]
    list(sort_by(data, lambda x: x))
    assert_that(data == [3, 1, 2], "source list should be unchanged")


@test("sort re-reads the source on each traversal")
def test_sort_restartable():
    data = [2, 1]
    result = sort_by(data, lambda x: x)
    assert_that(list(result) == [1, 2], "first traversal")
    data.append(0)
    assert_that(list(result) == [0, 1, 2], "second traversal sees the updated source")


@test("sort validates arguments at call time")
def test_sort_validation():
    assert_raises(ArgumentNoneError, lambda: sort_by(None, len))
    assert_raises(ArgumentNoneError, lambda: sort_by(words, None))
    assert_raises(ArgumentNoneError, lambda: sort_by(words, len, None))
    assert_raises(ArgumentNoneError, lambda: sort_by_descending(None, len))
    assert_raises(ArgumentNoneError, lambda: sort_by_descending(words, None))
    assert_raises(ArgumentNoneError, lambda: sort_by_descending(words, len, None))
    assert_raises(InvalidArgumentError, lambda: sort_by(words, len, 42))


@test("unorderable keys fail during traversal, not at call time")
def test_sort_unorderable():
    result = sort_by([1, "a"], lambda x: x)
    assert_raises(TypeError, lambda: list(result))


# comparer tests

@test("reverse comparer swaps arguments")
def test_reverse_comparer():
    reverse = ReverseComparer(DEFAULT)
    assert_that(reverse.compare(1, 2) > 0, "1 should rank after 2")
    assert_that(reverse.compare(2, 1) < 0, "2 should rank before 1")
    assert_that(reverse.compare(1, 1) == 0, "equal keys stay equal")


@test("function comparer delegates to the wrapped function")
def test_function_comparer():
    comparer = FunctionComparer(lambda x, y: len(x) - len(y))
    assert_that(comparer.compare("aa", "b") > 0, "longer string ranks after")
    assert_that(comparer("a", "b") == 0, "comparers are callable")


# fluent api

@test("fluent sort_by and sort_by_descending")
def test_fluent_sort():
    products = from_schema(product_schema, 15, seed=21)
    cheapest = products.sort_by(lambda p: p['price']).to.first()
    priciest = products.sort_by_descending(lambda p: p['price']).to.first()
    prices = [p['price'] for p in products]
    assert_that(cheapest['price'] == min(prices), "first ascending should be the cheapest")
    assert_that(priciest['price'] == max(prices), "first descending should be the most expensive")


@test("fluent sort_by with a comparer")
def test_fluent_sort_comparer():
    result = S(["b", "C", "a"]).sort_by(lambda s: s, CaseInsensitive()).to.list()
    assert_that(result == ["a", "b", "C"], "should sort case-insensitively")


if __name__ == "__main__":
    suite.run(title="seqy sort test suite")
