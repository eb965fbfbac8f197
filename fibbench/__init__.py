"""
fibbench - naive recursive Fibonacci workload for external timing tools
"""

from fibbench.args import to_int
from fibbench.fibonacci import fib
from fibbench.runner import VERSION, run, main

__all__ = ["VERSION", "fib", "to_int", "run", "main"]
