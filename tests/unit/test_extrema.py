import pytest
from seqstats.services.errors import EmptyError
from seqstats.services.extrema import arg_max, arg_min, maximum, minimum

def test_extrema_basic():
    data = [3, 1, 4, 2]
    assert minimum(data) == 1
    assert maximum(data) == 4
    assert arg_min(data) == 1
    assert arg_max(data) == 2

def test_arg_min_first_occurrence_wins():
    assert arg_min([3, 1, 4, 1]) == 1
    assert arg_max([4, 1, 4, 2]) == 0

def test_min_not_greater_than_max():
    for data in ([5], [2.5, -1.0, 7.25], [0, 0, 0], [-3, -9, -1]):
        assert minimum(data) <= maximum(data)

def test_extrema_keep_element_type():
    assert isinstance(minimum([3, 1, 2]), int)
    assert maximum([1.5, 0.5]) == 1.5

def test_extrema_empty():
    for fn in (arg_min, arg_max, minimum, maximum):
        with pytest.raises(EmptyError) as exc_info:
            fn([])
        assert exc_info.value.result == 0

def test_extrema_rejects_non_numeric():
    with pytest.raises(TypeError):
        minimum([1, "2"])
    with pytest.raises(TypeError):
        maximum([True, False])
