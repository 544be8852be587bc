"""Adapter package for collection store implementations.

Purpose:
    Provide concrete implementations of ``CollectionStorePort`` used by the
    product use cases.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests
    (for fault-injected stores).
"""
