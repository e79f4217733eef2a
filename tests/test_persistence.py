import warnings
import pytest
import numpy as np
from homalg_ph.core import BoundaryMatrix, dualize
from homalg_ph.errors import PreconditionError
from homalg_ph.persistence import (
    Point,
    PersistenceDiagram,
    PersistencePairing,
    betti_numbers,
    compute_persistence_pairs,
    extract_pairing,
    make_persistence_diagrams,
    reduce_batch
)
from homalg_ph.reduction import StandardReduction, TwistReduction
from homalg_ph.topology import Simplex, SimplicialComplex, make_boundary_matrix

TRIANGLE_PAIRS = [(0, None), (1, 3), (2, 4), (5, 6)]


@pytest.fixture
def K():
    return SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2], [0, 1, 2]])


@pytest.fixture
def K_weighted():
    return SimplicialComplex([
        Simplex(0, 0.0), Simplex(1, 0.0), Simplex(2, 0.0),
        Simplex([0, 1], 1.0), Simplex([0, 2], 1.0), Simplex([1, 2], 1.0),
        Simplex([0, 1, 2], 2.0),
    ])


class TestPersistencePairing:
    """Test the pairing container."""
    def test_add_and_views(self):
        pairing = PersistencePairing()
        pairing.add(1, 3)
        pairing.add(0)
        assert len(pairing) == 2
        assert pairing.contains(1, 3)
        assert pairing.contains(0)
        assert not pairing.contains(0, 3)
        assert pairing.essential() == [0]
        assert pairing.finite() == [(1, 3)]

    def test_birth_before_death(self):
        with pytest.raises(ValueError):
            PersistencePairing().add(3, 3)
        with pytest.raises(ValueError):
            PersistencePairing([(4, 2)])

    def test_sort(self):
        pairing = PersistencePairing([(5, 6), (0, None), (0, 2), (1, 3)])
        pairing.sort()
        assert list(pairing) == [(0, 2), (0, None), (1, 3), (5, 6)]

    def test_str(self):
        assert str(PersistencePairing([(0, None), (1, 3)])) == "0\tinf\n1\t3"


class TestComputePersistencePairs:
    """Test pair extraction, including the dualized read-back."""
    @pytest.mark.parametrize("algorithm", ['standard', 'twist'])
    def test_triangle(self, K, algorithm):
        pairing = compute_persistence_pairs(make_boundary_matrix(K), algorithm=algorithm)
        assert list(pairing) == TRIANGLE_PAIRS

    @pytest.mark.parametrize("algorithm", ['standard', 'twist'])
    def test_triangle_dualized(self, K, algorithm):
        M = make_boundary_matrix(K)
        pairing = compute_persistence_pairs(M, algorithm=algorithm, dualize=True)
        assert list(pairing) == TRIANGLE_PAIRS
        # the dual was reduced, not M
        assert not M.is_reduced()

    def test_strategy_instance(self, K):
        reduction = TwistReduction()
        pairing = compute_persistence_pairs(make_boundary_matrix(K), algorithm=reduction)
        assert list(pairing) == TRIANGLE_PAIRS
        assert reduction.stats.pairs == 3

    def test_extract_from_predualized(self, K):
        D = dualize(make_boundary_matrix(K))
        raw = StandardReduction()(D)
        assert sorted(raw) == [(0, 1), (2, 4), (3, 5)]
        assert list(extract_pairing(D, raw)) == TRIANGLE_PAIRS

    def test_zero_columns(self):
        assert len(compute_persistence_pairs(BoundaryMatrix())) == 0

    def test_isolated_vertices_are_essential(self):
        pairing = compute_persistence_pairs(BoundaryMatrix(3))
        assert list(pairing) == [(0, None), (1, None), (2, None)]

    def test_hollow_triangle(self):
        # boundary of the triangle only: one essential loop
        K = SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2]])
        pairing = compute_persistence_pairs(make_boundary_matrix(K), algorithm='twist')
        assert list(pairing) == [(0, None), (1, 3), (2, 4), (5, None)]


class TestPersistenceDiagram:
    """Test diagram points and clean-up operations."""
    def test_point(self):
        p = Point(1.0, 3.5)
        assert p.persistence == 2.5
        assert not p.is_unpaired
        assert Point(1.0).is_unpaired
        assert Point(1.0).persistence == np.inf

    def test_add_and_betti(self):
        D = PersistenceDiagram(dimension=1)
        D.add(0.0)
        D.add(0.0, 1.0)
        D.add(2.0)
        assert len(D) == 3
        assert D.betti() == 2
        assert D.dimension == 1

    def test_remove_diagonal(self):
        D = PersistenceDiagram([(1.0, 1.0), (0.0, 2.0), (3.0, np.inf)])
        D.remove_diagonal()
        assert list(D) == [Point(0.0, 2.0), Point(3.0, np.inf)]

    def test_remove_unpaired(self):
        D = PersistenceDiagram([(1.0, 1.0), (3.0, np.inf)])
        D.remove_unpaired()
        assert list(D) == [Point(1.0, 1.0)]

    def test_remove_duplicates(self):
        D = PersistenceDiagram([(2.0, 3.0), (0.0, 1.0), (2.0, 3.0), (0.0, 1.0)])
        D.remove_duplicates()
        assert list(D) == [Point(0.0, 1.0), Point(2.0, 3.0)]

    def test_merge_keeps_duplicates(self):
        D = PersistenceDiagram([(0.0, 1.0)])
        D.merge(PersistenceDiagram([(0.0, 1.0), (2.0, 5.0)]))
        assert len(D) == 3

    def test_to_numpy(self):
        D = PersistenceDiagram([(0.0, 1.0), (2.0, np.inf)])
        array = D.to_numpy()
        assert array.shape == (2, 2)
        assert np.isinf(array[1, 1])
        assert PersistenceDiagram().to_numpy().shape == (0, 2)

    def test_equality_and_str(self):
        D = PersistenceDiagram([(0.0, 1.0), (2.0, np.inf)])
        assert D == PersistenceDiagram([(0.0, 1.0), (2.0, np.inf)])
        assert D != PersistenceDiagram([(0.0, 1.0)])
        assert str(D) == "0.0\t1.0\n2.0\tinf\n"


class TestMakePersistenceDiagrams:
    """Test bucketing of pairs by dimension."""
    @pytest.mark.parametrize("algorithm", ['standard', 'twist'])
    def test_triangle(self, K, algorithm):
        pairing = compute_persistence_pairs(make_boundary_matrix(K), algorithm=algorithm)
        diagrams = make_persistence_diagrams(pairing, K)
        assert [D.dimension for D in diagrams] == [0, 1]
        D0, D1 = diagrams
        assert len(D0) == 3
        assert D0.betti() == 1
        assert len(D1) == 1
        assert D1.betti() == 0
        # the filled triangle creates nothing in dimension 2
        assert all(D.dimension != 2 for D in diagrams)

    def test_values(self, K_weighted):
        pairing = compute_persistence_pairs(make_boundary_matrix(K_weighted))
        D0, D1 = make_persistence_diagrams(pairing, K_weighted)
        assert sorted(D0) == [Point(0.0, 1.0), Point(0.0, 1.0), Point(0.0, np.inf)]
        assert list(D1) == [Point(1.0, 2.0)]
        for D in (D0, D1):
            assert all(p.x <= p.y for p in D)

    def test_diagonal_points(self, K):
        pairing = compute_persistence_pairs(make_boundary_matrix(K))
        D0, D1 = make_persistence_diagrams(pairing, K)
        D1.remove_diagonal()
        assert len(D1) == 0
        D0.remove_diagonal()
        assert list(D0) == [Point(0.0, np.inf)]

    def test_decreasing_values(self):
        K = SimplicialComplex([Simplex(0, 0.0), Simplex(1, 5.0), Simplex([0, 1], 1.0)])
        pairing = compute_persistence_pairs(make_boundary_matrix(K))
        with pytest.raises(PreconditionError):
            make_persistence_diagrams(pairing, K)

    def test_betti_numbers(self, K):
        pairing = compute_persistence_pairs(make_boundary_matrix(K))
        assert betti_numbers(make_persistence_diagrams(pairing, K)) == [1, 0]
        assert betti_numbers([]) == []


class TestReduceBatch:
    """Test concurrent reduction of independent matrices."""
    def test_matches_sequential(self, K):
        M = make_boundary_matrix(K)
        hollow = BoundaryMatrix.from_columns([[], [], [], [0, 1], [0, 2], [1, 2]])
        matrices = [M.copy(), hollow.copy(), M.copy(), BoundaryMatrix()]
        expected = [
            compute_persistence_pairs(m.copy()) for m in matrices
        ]
        results = reduce_batch(matrices, algorithm='twist', max_workers=2)
        assert results == expected
        assert all(m.is_reduced() for m in matrices)

    def test_progress_and_dualize(self, K):
        M = make_boundary_matrix(K)
        results = reduce_batch([M.copy(), M.copy()], dualize=True, progress=True)
        assert all(list(r) == TRIANGLE_PAIRS for r in results)

    def test_strategy_instance(self, K):
        M = make_boundary_matrix(K)
        results = reduce_batch([M], algorithm=StandardReduction())
        assert list(results[0]) == TRIANGLE_PAIRS

    def test_strategy_instance_keeps_settings(self):
        # not a chain complex: the last column has a single face
        matrices = [BoundaryMatrix.from_columns([[], [], [0, 1], [2]]) for _ in range(2)]
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            results = reduce_batch(matrices, algorithm=TwistReduction(validate=False))
        assert [list(r) for r in results] == [[(0, None), (1, 2), (2, 3)]] * 2

    def test_same_matrix_twice(self, K):
        M = make_boundary_matrix(K)
        with pytest.raises(ValueError):
            reduce_batch([M, M])


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
