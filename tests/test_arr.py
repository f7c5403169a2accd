import numpy as np
import pytest

import dense.arr as arr
from dense.compare import DoubleComparer
from dense.errors import InvalidRangeError, NullArgumentError

class TestConstruction:
    def test_shape_and_bound(self):
        a = arr.DenseArray([2, 3, 4], range(24))
        assert a.shape == [2, 3, 4]
        assert a.rank == 3
        assert a.bound == 24
        assert a.strides == [12, 4, 1]

    def test_data_is_flat(self):
        a = arr.DenseArray([2, 2], [[1, 2], [3, 4]])
        assert a.data.ndim == 1
        assert list(a) == [1, 2, 3, 4]

    def test_rank_too_high(self):
        with pytest.raises(InvalidRangeError) as e:
            arr.DenseArray([1, 1, 1, 1, 1], [1])
        assert e.value.param == 'shape'

    def test_zero_extent(self):
        with pytest.raises(InvalidRangeError) as e:
            arr.DenseArray([2, 0], [])
        assert e.value.param == 'x'

    def test_data_size_mismatch(self):
        with pytest.raises(InvalidRangeError) as e:
            arr.DenseArray([2, 2], [1, 2, 3])
        assert e.value.param == 'data'

    def test_blank_defaults(self):
        assert list(arr.DenseArray.blank([3], int)) == [0, 0, 0]
        assert list(arr.DenseArray.blank([2], bool)) == [False, False]
        assert list(arr.DenseArray.blank([2], str)) == ['', '']
        assert list(arr.DenseArray.blank([2], object)) == [None, None]

class TestAccess:
    def test_get(self):
        a = arr.DenseArray([2, 3], [
            1, 2, 3,
            4, 5, 6
        ])
        assert a[1, 2] == 6
        assert a.get([0, 1]) == 2

    def test_get_out_of_bounds(self):
        a = arr.DenseArray([2, 3], range(6))
        with pytest.raises(IndexError):
            a[2, 0]

    def test_tolist(self):
        a = arr.DenseArray([2, 1, 2], [1, 2, 3, 4])
        assert a.tolist() == [[[1, 2]], [[3, 4]]]

    def test_len(self):
        assert len(arr.DenseArray([5, 2], range(10))) == 5

    def test_major_cells(self):
        a = arr.DenseArray([3, 2], range(6))
        cells = list(a.major_cells())
        assert [c.tolist() for c in cells] == [[0, 1], [2, 3], [4, 5]]

    def test_major_cells_are_copies(self):
        a = arr.DenseArray([2, 2], [1, 2, 3, 4])
        cell = next(a.major_cells())
        cell.data[0] = 99
        assert a[0, 0] == 1

    def test_major_cells_vector(self):
        with pytest.raises(InvalidRangeError):
            list(arr.V([1, 2]).major_cells())

class TestCoords:
    def test_decode_follows_coords(self):
        shape = [2, 3, 4]
        for idx, c in enumerate(arr.coords(shape)):
            assert arr.decode(shape, c) == idx

    def test_coords_order(self):
        assert list(arr.coords([2, 2])) == [[0, 0], [0, 1], [1, 0], [1, 1]]

    def test_copy_block(self):
        src = np.arange(12)
        dst = np.zeros(6, dtype=int)
        arr.copy_block(src, [3, 4], [1, 1], dst, [2, 3], [0, 0], [2, 3])
        assert dst.tolist() == [5, 6, 7, 9, 10, 11]

class TestFromSequence:
    def test_truncates(self):
        a = arr.from_sequence(range(10), [2, 2])
        assert arr.match(a, arr.DenseArray([2, 2], [0, 1, 2, 3]))

    def test_pads(self):
        a = arr.from_sequence([1.5], [3])
        assert a.tolist() == [1.5, 0.0, 0.0]

    def test_generator_input(self):
        a = arr.from_sequence((i*i for i in range(4)), [2, 2])
        assert a.tolist() == [[0, 1], [4, 9]]

    def test_null(self):
        with pytest.raises(NullArgumentError):
            arr.from_sequence(None, [2])

class TestEquality:
    def test_match(self):
        a = arr.DenseArray([2, 2], [1, 2, 3, 4])
        assert arr.match(a, a.copy())
        assert a == a.copy()

    def test_shape_matters(self):
        a = arr.DenseArray([2, 2], [1, 2, 3, 4])
        b = arr.DenseArray([4, 1], [1, 2, 3, 4])
        assert not arr.match(a, b)
        assert not arr.array_equals(a, b)

    def test_array_equals_comparer(self):
        a = arr.V([0.1 + 0.2, 1.0])
        b = arr.V([0.3, 1.0])
        assert not arr.array_equals(a, b)
        assert arr.array_equals(a, b, DoubleComparer())

    def test_array_equals_null(self):
        with pytest.raises(NullArgumentError) as e:
            arr.array_equals(arr.V([1]), None)
        assert e.value.param == 'other'
