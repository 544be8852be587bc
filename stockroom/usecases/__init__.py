"""Use-case layer for product repository operations.

Each module sequences collection store calls and maps their results to
domain errors, without touching store internals directly.
"""
