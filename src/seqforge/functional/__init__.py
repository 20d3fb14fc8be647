"""Functional primitives for seqforge.

This package provides the stateless transformations of the project: sequence
queries, list/string conversion, array helpers, predicate combinators and
retry-safe invocation. Apart from the two in-place array operations and the
logging done while retrying, every function is side-effect free, so they can
be composed freely into data-processing pipelines.
"""
