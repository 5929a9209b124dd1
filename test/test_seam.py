import unittest

import numpy as np
import pytest

from seam_shrink import DegenerateGridError, find_seam, find_seam_cost


class TestFindSeam(unittest.TestCase):
    def test_known_minimum_path(self):
        energy = np.array([[9, 9, 9], [9, 1, 9], [9, 9, 1]], dtype=np.float64)
        seam = find_seam(energy)
        assert seam.tolist() == [0, 1, 2]
        assert find_seam_cost(energy, seam) == 11

    def test_follows_zero_column(self):
        energy = np.ones((20, 15))
        energy[:, 9] = 0
        assert (find_seam(energy) == 9).all()

    def test_follows_diagonal_valley(self):
        energy = np.full((10, 12), 10.0)
        for r in range(10):
            energy[r, r + 1] = 0
        assert find_seam(energy).tolist() == list(range(1, 11))

    def test_prefers_left_on_tie(self):
        energy = np.array([[1, 1, 1], [5, 0, 5]], dtype=np.float64)
        assert find_seam(energy).tolist() == [0, 1]

        energy = np.array([[3, 2, 1], [5, 5, 0]], dtype=np.float64)
        # middle and the clamped right neighbour tie for column 2
        assert find_seam(energy).tolist() == [2, 2]

        energy = np.array([[2, 1, 1, 2], [9, 9, 0, 9]], dtype=np.float64)
        # left and middle tie for column 2
        assert find_seam(energy).tolist() == [1, 2]

    def test_uniform_energy(self):
        assert find_seam(np.zeros((4, 5))).tolist() == [0, 0, 0, 0]

    def test_last_row_first_minimum(self):
        energy = np.array([[0, 0, 0, 0], [3, 1, 2, 1]], dtype=np.float64)
        assert find_seam(energy).tolist() == [0, 1]

    def test_single_column(self):
        seam = find_seam(np.arange(7.0).reshape((7, 1)))
        assert seam.tolist() == [0] * 7

    def test_single_row(self):
        assert find_seam(np.array([[4.0, 2.0, 2.0, 3.0]])).tolist() == [1]

    def test_horizontal(self):
        energy = np.ones((6, 9))
        energy[4, :] = 0
        seam = find_seam(energy, "horizontal")
        assert seam.shape == (9,)
        assert (seam == 4).all()
        assert (find_seam(energy.T, "vertical") == seam).all()
        assert find_seam_cost(energy, seam, "horizontal") == 0

    def test_connected(self):
        rng = np.random.RandomState(0)
        for _ in range(20):
            h, w = rng.randint(1, 30, size=2)
            energy = rng.random_sample((h, w)) * 100
            for direction in ("vertical", "horizontal"):
                seam = find_seam(energy, direction)
                extent = w if direction == "vertical" else h
                assert seam.size == (h if direction == "vertical" else w)
                assert seam.min() >= 0 and seam.max() < extent
                assert (np.abs(np.diff(seam)) <= 1).all()

    def test_optimal(self):
        rng = np.random.RandomState(1)
        energy = rng.randint(0, 10, (5, 4)).astype(np.float64)
        h, w = energy.shape

        def best(r, c):
            if r == h - 1:
                return energy[r, c]
            below = [best(r + 1, n) for n in (c - 1, c, c + 1) if 0 <= n < w]
            return energy[r, c] + min(below)

        expected = min(best(0, c) for c in range(w))
        assert find_seam_cost(energy, find_seam(energy)) == expected

    def test_deterministic(self):
        energy = np.random.RandomState(2).randint(0, 3, (12, 12)) * 1.0
        assert (find_seam(energy) == find_seam(energy)).all()

    def test_invalid(self):
        with pytest.raises(DegenerateGridError):
            find_seam(np.zeros((0, 3)))
        with pytest.raises(DegenerateGridError):
            find_seam(np.zeros((3, 0)))
        with pytest.raises(DegenerateGridError):
            find_seam(np.zeros(3))
        with pytest.raises(ValueError):
            find_seam(np.zeros((3, 3)), "diagonal")
