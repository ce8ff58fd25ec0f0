import pytest

from benchrunner.elementwise import elementwise_add, elementwise_add_unroll


def test_add_simple():
    assert elementwise_add([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == [5.0, 7.0, 9.0]


def test_unroll_simple():
    assert elementwise_add_unroll([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == [5.0, 7.0, 9.0]


@pytest.mark.parametrize("length", range(0, 13))
def test_unroll_matches_plain(length):
    a = [float(i) * 1.5 for i in range(length)]
    b = [float(i) - 0.25 for i in range(length)]
    assert elementwise_add_unroll(a, b) == elementwise_add(a, b)


@pytest.mark.parametrize("func", [elementwise_add, elementwise_add_unroll])
def test_empty(func):
    assert func([], []) == []


@pytest.mark.parametrize("func", [elementwise_add, elementwise_add_unroll])
def test_adding_zeros_is_identity(func):
    a = [0.5, -2.0, 3.25, 7.0, 1.0]
    assert func(a, [0.0] * len(a)) == a


@pytest.mark.parametrize("func", [elementwise_add, elementwise_add_unroll])
def test_commutative(func):
    a = [1.0, 2.5, -3.0, 4.0, 9.0, 0.125]
    b = [6.0, -1.0, 2.0, 0.5, 3.0, 8.0]
    assert func(a, b) == func(b, a)


@pytest.mark.parametrize("func", [elementwise_add, elementwise_add_unroll])
def test_length_mismatch_raises(func):
    with pytest.raises(ValueError):
        func([1.0, 2.0], [1.0])


@pytest.mark.parametrize("func", [elementwise_add, elementwise_add_unroll])
def test_inputs_untouched(func):
    a = [1.0, 2.0, 3.0, 4.0, 5.0]
    b = [5.0, 4.0, 3.0, 2.0, 1.0]
    result = func(a, b)
    assert a == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert len(result) == len(a)