import pytest

import dense.arr as arr
from dense.errors import InvalidRangeError, NullArgumentError
from dense.jagged import from_jagged, to_jagged

class TestToJagged:
    def test_vector_trims_tail(self):
        assert to_jagged(arr.V([1, 0, 2, 0, 0])) == [1, 0, 2]

    def test_vector_all_default(self):
        assert to_jagged(arr.V([0.0, 0.0])) == []

    def test_no_trim(self):
        a = arr.DenseArray([2, 2], [1, 0, 0, 0])
        assert to_jagged(a, trim=False) == [[1, 0], [0, 0]]

    def test_matrix_keeps_outer_length(self):
        a = arr.DenseArray([3, 3], [
            1, 0, 0,
            2, 3, 0,
            0, 0, 0
        ])
        assert to_jagged(a) == [[1], [2, 3], []]

    def test_interior_defaults_kept(self):
        a = arr.DenseArray([1, 4], [0, 0, 5, 0])
        assert to_jagged(a) == [[0, 0, 5]]

    def test_rank3(self):
        a = arr.DenseArray([2, 2, 2], [
            1, 0,
            0, 0,

            0, 0,
            0, 0
        ])
        assert to_jagged(a) == [[[1]], []]

    def test_rank3_interior_empty_row(self):
        a = arr.DenseArray([1, 3, 1], [1, 0, 2])
        assert to_jagged(a) == [[[1], [], [2]]]

    def test_rank4(self):
        a = arr.DenseArray([2, 1, 2, 2], [
            0, 0,
            0, 7,

            0, 0,
            0, 0
        ])
        assert to_jagged(a) == [[[[], [0, 7]]], []]

    def test_strings(self):
        a = arr.DenseArray([2, 2], ['a', '', '', ''])
        assert to_jagged(a) == [['a'], []]

    def test_objects(self):
        a = arr.DenseArray([2], ['a', None], dtype=object)
        assert to_jagged(a) == ['a']

    def test_null(self):
        with pytest.raises(NullArgumentError):
            to_jagged(None)

class TestFromJagged:
    def test_pads(self):
        a = from_jagged([[1], [2, 3], []])
        assert arr.match(a, arr.DenseArray([3, 2], [
            1, 0,
            2, 3,
            0, 0
        ]))

    def test_none_is_empty(self):
        a = from_jagged([[1, 2], None, [3]])
        assert a.tolist() == [[1, 2], [0, 0], [3, 0]]

    def test_vector(self):
        a = from_jagged([1.5, 2.5])
        assert a.shape == [2]
        assert a.tolist() == [1.5, 2.5]

    def test_rank3(self):
        a = from_jagged([[[1, 2, 3]], [[4], [5]]])
        assert a.shape == [2, 2, 3]
        assert a.tolist() == [[[1, 2, 3], [0, 0, 0]], [[4, 0, 0], [5, 0, 0]]]

    def test_shape_crops(self):
        a = from_jagged([[1, 2, 3], [4]], shape=[1, 2])
        assert a.tolist() == [[1, 2]]

    def test_shape_pads(self):
        a = from_jagged([[1]], shape=[2, 3])
        assert a.tolist() == [[1, 0, 0], [0, 0, 0]]

    def test_dtype(self):
        a = from_jagged([[1], [2, 3]], dtype=float)
        assert a.dtype == float
        assert a.tolist() == [[1.0, 0.0], [2.0, 3.0]]

    def test_strings(self):
        a = from_jagged([['a', 'bc'], ['d']])
        assert a.tolist() == [['a', 'bc'], ['d', '']]

    def test_round_trip(self):
        j = [[1, 2], [3], [0, 4]]
        assert to_jagged(from_jagged(j)) == j

    def test_round_trip_rank3(self):
        j = [[[1], [0, 2]], [[3, 4]]]
        assert to_jagged(from_jagged(j)) == j

    def test_empty(self):
        with pytest.raises(InvalidRangeError) as e:
            from_jagged([])
        assert e.value.param == 'x'

    def test_empty_rows(self):
        with pytest.raises(InvalidRangeError) as e:
            from_jagged([[], []])
        assert e.value.param == 'x'

    def test_too_deep(self):
        with pytest.raises(InvalidRangeError) as e:
            from_jagged([[[[[1]]]]])
        assert e.value.param == 'source.rank'

    def test_shape_shallower_than_nesting(self):
        with pytest.raises(InvalidRangeError) as e:
            from_jagged([[1, 2], [3]], shape=[2])
        assert e.value.param == 'shape'

    def test_shape_deeper_than_nesting(self):
        a = from_jagged([1, 2], shape=[2, 2])
        assert a.tolist() == [[0, 0], [0, 0]]

    def test_zero_extent_in_shape(self):
        with pytest.raises(InvalidRangeError) as e:
            from_jagged([[1]], shape=[0, 1])
        assert e.value.param == 'y'

    def test_null(self):
        with pytest.raises(NullArgumentError):
            from_jagged(None)
