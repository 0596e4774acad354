"""
numcheck-bench

Micro-benchmark harness comparing three ways of deciding whether a string
holds a non-negative integer: parse-and-catch, regex matching and a
library digit check.
"""

__version__ = "1.0.0"
