import numpy as np

from dense.compare import DoubleComparer, SingleComparer

class TestDoubleComparer:
    def test_within_sensitivity(self):
        c = DoubleComparer()
        assert c(1.0, 1.0 + 5e-7)
        assert c(1.0, 1.0 - 5e-7)

    def test_outside_sensitivity(self):
        c = DoubleComparer()
        assert not c(1.0, 1.00001)

    def test_bound_is_exclusive(self):
        c = DoubleComparer(0.5)
        assert not c.equals(1.0, 1.5)
        assert c.equals(1.0, 1.25)

    def test_custom_sensitivity(self):
        assert DoubleComparer(0.1)(2.0, 2.05)

class TestSingleComparer:
    def test_float32_noise(self):
        c = SingleComparer()
        x = np.float32(0.1) + np.float32(0.2)
        assert c(x, 0.3)

    def test_outside_sensitivity(self):
        assert not SingleComparer()(1.0, 1.001)
