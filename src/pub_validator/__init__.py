"""pub-validator core package.

This package provides the pre-publish validation engine: the validator
contract, the concurrent orchestrator, and the checks it runs.
"""

__all__ = [
    "core",
]
