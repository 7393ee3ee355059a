import math
import pytest
from fractions import Fraction
from seqstats.services.aggregate import (
    geo_mean, harmonic_mean, mean, median, product, std, total, var)
from seqstats.services.errors import EmptyError

DATA = [3, 1, 4, 2]

def test_total_and_product():
    assert total(DATA) == 10
    assert product(DATA) == 24

def test_total_and_product_identity_on_empty():
    assert total([]) == 0
    assert product([]) == 1

def test_total_keeps_element_type():
    assert isinstance(total([1, 2]), int)
    assert total([Fraction(1, 3), Fraction(2, 3)]) == 1

def test_means():
    assert mean(DATA) == 2.5
    assert isinstance(mean([2, 4]), float)
    assert geo_mean(DATA) == pytest.approx(2.213363839400643)
    assert harmonic_mean(DATA) == pytest.approx(1.9200000000000004)

def test_geo_mean_non_positive_follows_float_semantics():
    assert geo_mean([0, 4]) == 0.0
    assert math.isnan(geo_mean([-1, 4]))

def test_harmonic_mean_zero_element():
    assert harmonic_mean([0, 2]) == 0.0

def test_median_odd_and_even():
    assert median([3, 1, 2]) == 2
    assert isinstance(median([3, 1, 2]), float)
    assert median([3, 1, 2, 4]) == 2.5

def test_median_does_not_mutate():
    data = [5, 3, 9, 1]
    median(data)
    assert data == [5, 3, 9, 1]

def test_var_and_std():
    assert var(DATA) == 1.25
    assert std(DATA) == pytest.approx(1.118033988749895)
    assert var([7]) == 0.0

@pytest.mark.parametrize("fn", [mean, geo_mean, harmonic_mean, median, var, std])
def test_empty(fn):
    with pytest.raises(EmptyError) as exc_info:
        fn([])
    assert exc_info.value.result == 0.0

def test_empty_error_is_value_error():
    with pytest.raises(ValueError):
        mean([])

def test_ints_beyond_float_range_saturate():
    huge = 10**400
    assert mean([huge]) == math.inf
    assert mean([-huge]) == -math.inf
    assert median([huge, 1, 2]) == 2.0
    assert median([huge]) == math.inf
    assert harmonic_mean([huge]) == math.inf
    assert math.isnan(var([huge]))

def test_geo_mean_of_big_ints():
    assert geo_mean([10**400, 1]) == pytest.approx(1e200)
    assert geo_mean([10**800]) == math.inf
