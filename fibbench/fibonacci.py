#!/usr/bin/env python3
"""
Fibonacci benchmark workload - tests recursive function calls
"""


def fib(value: int) -> int:
    """
    Naive double recursion, no caching.

    Anything below 2, negatives included, is returned unchanged.
    """
    if value < 2:
        return value
    return fib(value - 1) + fib(value - 2)
