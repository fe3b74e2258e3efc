# Tests for the GA term sum type in core/term.py

import pytest

from core.errors import IndexOutOfRangeError
from core.grade import Grade
from core.term import (
    BivectorTerm,
    BladeTerm,
    MultivectorTerm,
    ScalarTerm,
    TermVisitor,
    TrivectorTerm,
    VectorTerm,
    bivector,
    canonical_blade,
    grade,
    has_grade,
    match_term,
    multivector,
    scalar,
    trivector,
    vector,
    visit_term,
)


class TestFactories:
    def test_variants(self):
        assert isinstance(scalar(1.0), ScalarTerm)
        assert isinstance(vector([(1, 1.0)]), VectorTerm)
        assert isinstance(bivector([(1, 2, 1.0)]), BivectorTerm)
        assert isinstance(trivector([(1, 2, 3, 1.0)]), TrivectorTerm)
        assert isinstance(multivector([BladeTerm((1,), 1.0)]), MultivectorTerm)

    def test_grade_is_variant(self):
        assert grade(scalar(3.14)) is Grade.SCALAR
        assert grade(vector([])) is Grade.VECTOR
        assert grade(bivector([(1, 2, 1.5)])) is Grade.BIVECTOR
        assert grade(trivector([(1, 2, 3, 1.0)])) is Grade.TRIVECTOR
        assert grade(multivector([])) is Grade.MULTIVECTOR

    def test_has_grade(self):
        v = vector([(1, 2.0), (2, 3.0)])
        assert has_grade(v, 1)
        assert has_grade(v, Grade.VECTOR)
        assert not has_grade(v, 2)

    def test_multivector_accepts_pairs(self):
        m = multivector([((1, 2), 3.0), ((), 1.0)])
        assert m.to_dict() == {(1, 2): 3.0, (): 1.0}

    def test_four_index_blade_is_structural(self):
        m = multivector([BladeTerm((1, 2, 3, 4), 0.5)])
        assert m.blades[0].grade is Grade.MULTIVECTOR


class TestCanonicalisation:
    def test_sorted_with_sign(self):
        assert canonical_blade((2, 1)) == ((1, 2), -1)
        assert canonical_blade((3, 1, 2)) == ((1, 2, 3), 1)
        assert canonical_blade((2, 1, 3)) == ((1, 2, 3), -1)

    def test_bivector_antisymmetry(self):
        b = bivector([(2, 1, 1.5)])
        assert b.components == ((1, 2, -1.5),)

    def test_trivector_permutation(self):
        t = trivector([(3, 2, 1, 2.0)])
        # (3,2,1) -> (1,2,3) takes three swaps
        assert t.components == ((1, 2, 3, -2.0),)

    def test_blade_term_canonical(self):
        b = BladeTerm((3, 1), 4.0)
        assert b.indices == (1, 3)
        assert b.coefficient == -4.0

    def test_repeated_index_rejected(self):
        with pytest.raises(IndexOutOfRangeError):
            bivector([(1, 1, 2.0)])
        with pytest.raises(IndexOutOfRangeError):
            BladeTerm((2, 3, 2), 1.0)

    def test_negative_index_rejected(self):
        with pytest.raises(IndexOutOfRangeError):
            vector([(-1, 1.0)])

    def test_non_int_index_rejected(self):
        with pytest.raises(IndexOutOfRangeError):
            vector([(1.5, 1.0)])

    def test_wrong_arity_rejected(self):
        with pytest.raises(ValueError):
            bivector([(1, 2.0)])

    def test_duplicates_merged(self):
        v = vector([(1, 1.0), (2, 2.0), (1, 3.0)])
        assert v.components == ((1, 4.0), (2, 2.0))

    def test_equivalent_blades_merged(self):
        b = bivector([(1, 2, 1.0), (2, 1, 3.0)])
        assert b.components == ((1, 2, -2.0),)


class TestEquality:
    def test_key_order_irrelevant(self):
        assert vector([(1, 1.0), (2, 2.0)]) == vector([(2, 2.0), (1, 1.0)])

    def test_variant_matters(self):
        assert vector([]) != bivector([])

    def test_hashable(self):
        a = vector([(1, 1.0), (2, 2.0)])
        b = vector([(2, 2.0), (1, 1.0)])
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_immutable(self):
        s = scalar(1.0)
        with pytest.raises(AttributeError):
            s.value = 2.0


class TestDispatch:
    HANDLERS = (
        lambda v: f"Got scalar: {v}",
        lambda c: f"Got vector with {len(c)} components",
        lambda c: "bivector",
        lambda c: "trivector",
        lambda b: "multivector",
    )

    def test_match_scalar(self):
        assert match_term(scalar(3.14), *self.HANDLERS) == "Got scalar: 3.14"

    def test_match_vector(self):
        v = vector([(1, 2.0), (2, 3.0)])
        assert match_term(v, *self.HANDLERS) == "Got vector with 2 components"

    def test_match_rejects_foreign(self):
        with pytest.raises(TypeError):
            match_term(3.0, *self.HANDLERS)

    def test_visitor(self):
        class CountVisitor(TermVisitor):
            def visit_scalar(self, value):
                return 1

            def visit_vector(self, components):
                return len(components)

            def visit_bivector(self, components):
                return len(components)

            def visit_trivector(self, components):
                return len(components)

            def visit_multivector(self, blades):
                return len(blades)

        v = CountVisitor()
        assert visit_term(scalar(2.0), v) == 1
        assert visit_term(bivector([(1, 2, 1.0), (2, 3, 1.0)]), v) == 2
        assert visit_term(multivector([((1,), 1.0), ((1, 2), 1.0), ((1, 2, 3), 1.0)]), v) == 3
