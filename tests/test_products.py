# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

import math

import pytest
import torch

from core.algebra import CliffordAlgebra
from core.errors import IndexOutOfRangeError
from core.grade import Grade
from core.products import (
    from_dense,
    geometric_product,
    grade_projection,
    inner_product,
    outer_product,
    reverse,
    to_dense,
)
from core.term import (
    BivectorTerm,
    MultivectorTerm,
    ScalarTerm,
    TrivectorTerm,
    VectorTerm,
    bivector,
    multivector,
    scalar,
    trivector,
    vector,
)


@pytest.fixture
def algebra():
    return CliffordAlgebra(p=3, q=0, device='cpu')


class TestCliffordAlgebra:
    def test_dim(self, algebra):
        assert algebra.dim == 8
        assert algebra.num_grades == 4

    def test_cayley_e1_e2(self, algebra):
        # e1 (1) * e2 (2) -> e12 (3), sign +; e2 * e1 -> -e12
        A = algebra.zeros()
        A[1] = 1.0
        B = algebra.zeros()
        B[2] = 1.0
        assert algebra.geometric_product(A, B)[3].item() == 1.0
        assert algebra.geometric_product(B, A)[3].item() == -1.0

    def test_vectors_square_to_one(self, algebra):
        for i in (1, 2, 4):
            e = algebra.zeros()
            e[i] = 1.0
            sq = algebra.geometric_product(e, e)
            assert sq[0].item() == 1.0
            assert torch.count_nonzero(sq).item() == 1

    def test_pseudoscalar_squares_to_minus_one(self, algebra):
        I = algebra.zeros()
        I[7] = 1.0
        assert algebra.geometric_product(I, I)[0].item() == -1.0

    def test_associativity(self, algebra):
        torch.manual_seed(42)
        A, B, C = (torch.randn(algebra.dim, dtype=torch.float64) for _ in range(3))
        left = algebra.geometric_product(algebra.geometric_product(A, B), C)
        right = algebra.geometric_product(A, algebra.geometric_product(B, C))
        assert torch.allclose(left, right, atol=1e-10)

    def test_batched(self, algebra):
        torch.manual_seed(0)
        A = torch.randn(5, algebra.dim, dtype=torch.float64)
        B = torch.randn(5, algebra.dim, dtype=torch.float64)
        out = algebra.geometric_product(A, B)
        assert out.shape == (5, algebra.dim)
        assert torch.allclose(out[2], algebra.geometric_product(A[2], B[2]))

    def test_reverse_signs(self, algebra):
        assert algebra.rev_signs.tolist() == [1, 1, 1, -1, 1, -1, -1, -1]

    def test_negative_signature(self):
        alg = CliffordAlgebra(p=2, q=1, device='cpu')
        e3 = alg.zeros()
        e3[4] = 1.0
        assert alg.geometric_product(e3, e3)[0].item() == -1.0

    def test_blade_index(self, algebra):
        assert algebra.blade_index((1, 3)) == 5
        assert algebra.blade_indices(6) == (2, 3)
        with pytest.raises(IndexOutOfRangeError):
            algebra.blade_index((4,))
        with pytest.raises(IndexOutOfRangeError):
            algebra.blade_index((0,))


class TestDenseConversion:
    def test_to_dense(self):
        mv = to_dense(vector([(1, 2.0), (3, 4.0)]))
        assert mv.tolist() == [0.0, 2.0, 0.0, 0.0, 4.0, 0.0, 0.0, 0.0]

    def test_from_dense_orders_by_grade(self):
        mv = to_dense(multivector([((1, 2, 3), 1.0), ((2,), 2.0), ((), 3.0)]))
        m = from_dense(mv)
        assert [b.indices for b in m.blades] == [(), (2,), (1, 2, 3)]

    def test_from_dense_homogeneous(self):
        mv = to_dense(multivector([((1,), 1.0), ((1, 2), 2.0)]))
        b = from_dense(mv, Grade.BIVECTOR)
        assert isinstance(b, BivectorTerm)
        assert b.components == ((1, 2, 2.0),)

    def test_index_out_of_algebra(self):
        with pytest.raises(IndexOutOfRangeError):
            to_dense(vector([(4, 1.0)]))


class TestGeometricProduct:
    def test_orthogonal_vectors(self):
        result = geometric_product(vector([(1, 1.0)]), vector([(2, 1.0)]))
        assert isinstance(result, MultivectorTerm)
        assert result.to_dict() == {(1, 2): 1.0}

    def test_parallel_vectors(self):
        result = geometric_product(vector([(1, 2.0)]), vector([(1, 3.0)]))
        assert result.to_dict() == {(): 6.0}

    def test_scalar_keeps_variant(self):
        result = geometric_product(scalar(2.0), bivector([(1, 2, 1.5)]))
        assert isinstance(result, BivectorTerm)
        assert result.components == ((1, 2, 3.0),)

    def test_vector_trivector_is_bivector(self):
        result = geometric_product(vector([(1, 1.0)]), trivector([(1, 2, 3, 1.0)]))
        assert isinstance(result, BivectorTerm)
        assert result.to_dict() == {(2, 3): 1.0}

    def test_operator(self):
        assert vector([(1, 1.0)]) * vector([(1, 1.0)]) == multivector([((), 1.0)])


class TestOuterProduct:
    def test_wedge_vectors(self):
        result = outer_product(vector([(1, 1.0)]), vector([(2, 1.0)]))
        assert isinstance(result, BivectorTerm)
        assert result.components == ((1, 2, 1.0),)

    def test_antisymmetric(self):
        a = vector([(1, 1.0), (2, 2.0)])
        b = vector([(2, 3.0), (3, 1.0)])
        assert outer_product(a, b).to_dict() == {
            k: -v for k, v in outer_product(b, a).to_dict().items()
        }

    def test_self_wedge_vanishes(self):
        v = vector([(1, 1.0), (2, 2.0)])
        assert outer_product(v, v).to_dict() == {}

    def test_vector_bivector_trivector(self):
        result = vector([(3, 2.0)]) ^ bivector([(1, 2, 1.0)])
        assert isinstance(result, TrivectorTerm)
        assert result.to_dict() == {(1, 2, 3): 2.0}

    def test_overflow_grade_is_multivector(self):
        result = outer_product(bivector([(1, 2, 1.0)]), bivector([(2, 3, 1.0)]))
        assert isinstance(result, MultivectorTerm)
        assert result.to_dict() == {}


class TestInnerProduct:
    def test_dot(self):
        result = vector([(1, 2.0), (2, 3.0)]) | vector([(1, 4.0), (2, 1.0)])
        assert isinstance(result, ScalarTerm)
        assert result.value == 11.0

    def test_bivector_vector(self):
        result = inner_product(bivector([(1, 2, 1.0)]), vector([(2, 1.0)]))
        assert isinstance(result, VectorTerm)
        # e12 . e2 = e1
        assert result.to_dict() == {(1,): 1.0}

    def test_scalar_scales(self):
        result = inner_product(scalar(2.0), vector([(3, 1.5)]))
        assert result == vector([(3, 3.0)])


class TestUnary:
    def test_reverse(self):
        assert ~bivector([(1, 2, 1.0)]) == bivector([(1, 2, -1.0)])
        assert reverse(vector([(1, 2.0)])) == vector([(1, 2.0)])
        assert reverse(trivector([(1, 2, 3, 1.0)])) == trivector([(1, 2, 3, -1.0)])

    def test_grade_projection(self):
        m = multivector([((), 1.0), ((1,), 2.0), ((2, 3), 3.0)])
        assert grade_projection(m, 1) == vector([(1, 2.0)])
        assert grade_projection(m, 2) == bivector([(2, 3, 3.0)])
        assert grade_projection(m, 0) == scalar(1.0)
        assert grade_projection(m, 3) == trivector([])


class TestNonFinite:
    def test_kernel_absent_blades_stay_zero(self, algebra):
        A = algebra.zeros()
        A[0] = 2.0
        B = algebra.zeros()
        B[1] = math.inf
        out = algebra.geometric_product(A, B)
        assert out[1].item() == math.inf
        assert torch.count_nonzero(out).item() == 1

    def test_geometric_inf(self):
        result = geometric_product(scalar(2.0), vector([(1, math.inf)]))
        assert isinstance(result, VectorTerm)
        assert result.to_dict() == {(1,): math.inf}

    def test_geometric_nan(self):
        result = geometric_product(vector([(1, math.nan)]), vector([(2, 1.0)]))
        assert isinstance(result, MultivectorTerm)
        ((key, c),) = result.to_dict().items()
        assert key == (1, 2)
        assert math.isnan(c)

    def test_outer_nan(self):
        result = outer_product(vector([(1, math.nan)]), vector([(2, 1.0)]))
        assert isinstance(result, BivectorTerm)
        ((i, j, c),) = result.components
        assert (i, j) == (1, 2)
        assert math.isnan(c)

    def test_outer_inf(self):
        result = vector([(3, -math.inf)]) ^ bivector([(1, 2, 1.0)])
        assert result.to_dict() == {(1, 2, 3): -math.inf}

    def test_inner_inf(self):
        result = inner_product(vector([(1, math.inf)]), vector([(1, 2.0), (2, 5.0)]))
        assert isinstance(result, ScalarTerm)
        assert result.value == math.inf

    def test_inner_nan(self):
        result = inner_product(bivector([(1, 2, math.nan)]), vector([(2, 1.0)]))
        assert isinstance(result, VectorTerm)
        ((i, c),) = result.components
        assert i == 1
        assert math.isnan(c)

    def test_from_dense_keeps_nan(self):
        mv = to_dense(vector([(2, math.nan)]))
        ((i, c),) = from_dense(mv, Grade.VECTOR).components
        assert i == 2
        assert math.isnan(c)
