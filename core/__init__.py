# Gradeshape: Grade- and Unit-Checked Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Core geometric-algebra kernel with grade checking.

Provides grade arithmetic, the sparse term sum type and its operations,
the dense Cl(3,0) product engine, and grade-tagged value wrappers.
"""

from .errors import (
    AlgebraError,
    GradeMismatchError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from .grade import (
    Grade,
    MAX_GRADE,
    as_grade,
    can_add,
    outer_product_grade,
    inner_product_grade,
    geometric_product_grades,
)
from .term import (
    BladeTerm,
    GATerm,
    ScalarTerm,
    VectorTerm,
    BivectorTerm,
    TrivectorTerm,
    MultivectorTerm,
    TermVisitor,
    scalar,
    vector,
    bivector,
    trivector,
    multivector,
    grade,
    has_grade,
    match_term,
    visit_term,
)
from .operations import (
    add,
    scalar_multiply,
    norm,
    to_string,
    term_map,
    term_filter,
    term_fold,
)
from .algebra import CliffordAlgebra, default_algebra
from .products import (
    geometric_product,
    outer_product,
    inner_product,
    reverse,
    grade_projection,
    to_dense,
    from_dense,
)
from .graded import (
    GradeIndexed,
    ScalarValue,
    VectorValue,
    BivectorValue,
    TrivectorValue,
    MultivectorValue,
    graded,
    safe_add,
    safe_scalar_multiply,
    safe_outer_product,
    safe_inner_product,
    OperationMatrix,
    TypeInspector,
)
from .validation import check_multivector, check_grade_pure

__all__ = [
    # errors
    "AlgebraError",
    "GradeMismatchError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    # grade
    "Grade",
    "MAX_GRADE",
    "as_grade",
    "can_add",
    "outer_product_grade",
    "inner_product_grade",
    "geometric_product_grades",
    # terms
    "BladeTerm",
    "GATerm",
    "ScalarTerm",
    "VectorTerm",
    "BivectorTerm",
    "TrivectorTerm",
    "MultivectorTerm",
    "TermVisitor",
    "scalar",
    "vector",
    "bivector",
    "trivector",
    "multivector",
    "grade",
    "has_grade",
    "match_term",
    "visit_term",
    # operations
    "add",
    "scalar_multiply",
    "norm",
    "to_string",
    "term_map",
    "term_filter",
    "term_fold",
    # products
    "CliffordAlgebra",
    "default_algebra",
    "geometric_product",
    "outer_product",
    "inner_product",
    "reverse",
    "grade_projection",
    "to_dense",
    "from_dense",
    # graded values
    "GradeIndexed",
    "ScalarValue",
    "VectorValue",
    "BivectorValue",
    "TrivectorValue",
    "MultivectorValue",
    "graded",
    "safe_add",
    "safe_scalar_multiply",
    "safe_outer_product",
    "safe_inner_product",
    "OperationMatrix",
    "TypeInspector",
    # validation
    "check_multivector",
    "check_grade_pure",
]
