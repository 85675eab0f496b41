"""Services Layer: the imperative shell around core/ rules.

Invariants:
    - Each service wraps one AsyncSession and commits at most once per operation
    - Errors are raised as core/errors.py types and never retried here
"""
