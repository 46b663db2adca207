"""Status codes, report selectors and numeric limits used throughout the solver."""

from enum import IntEnum

VERSION = "0.1.0"

DOUBLE_INFINITY = 1e50
"""Value treated as an infinite bound for floating-point options."""

INT_INFINITY = 2**31 - 1
"""Value treated as an infinite bound for integer options."""


class FaRSAStatus(IntEnum):
    """Termination status of the solver."""

    UNSET = -1
    SUCCESS = 0
    CPU_TIME_LIMIT = 1
    ITERATE_NORM_LIMIT = 2
    ITERATION_LIMIT = 3
    FUNCTION_EVALUATION_LIMIT = 4
    GRADIENT_EVALUATION_LIMIT = 5
    INITIALIZATION_FAILURE = 6
    FUNCTION_EVALUATION_FAILURE = 7
    GRADIENT_EVALUATION_FAILURE = 8
    FUNCTION_EVALUATION_ASSERT = 9
    GRADIENT_EVALUATION_ASSERT = 10
    MATRIX = 11
    MATRIX_ASSERT = 12
    VECTOR = 13
    VECTOR_ASSERT = 14
    DIRECTION_COMPUTATION_FAILURE = 15
    LINE_SEARCH_FAILURE = 16
    APPROXIMATE_HESSIAN_UPDATE_FAILURE = 17
    POINT_SET_UPDATE_FAILURE = 18


class DCStatus(IntEnum):
    """Termination status of a direction computation."""

    UNSET = -1
    SUCCESS = 0
    EVALUATION_FAILURE = 1
    ITERATION_LIMIT = 2


class LSStatus(IntEnum):
    """Termination status of a line search."""

    UNSET = -1
    SUCCESS = 0
    EVALUATION_FAILURE = 1
    STEPSIZE_TOO_SMALL = 2
    ITERATION_LIMIT = 3


class ReportType(IntEnum):
    """Which part of the algorithm a message comes from."""

    SOLVER = 0
    SUBSOLVER = 1


class ReportLevel(IntEnum):
    """How detailed a message is; larger means more verbose."""

    BASIC = 0
    PER_ITERATION = 1
    PER_INNER_ITERATION = 2


class SparseFormatType(IntEnum):
    """Storage layout of a sparse matrix."""

    COORDINATE_LIST = 0
    COMPRESSED_SPARSE_COLUMN = 1
    COMPRESSED_SPARSE_ROW = 2