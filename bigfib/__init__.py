"""Large Fibonacci numbers using base-10^9 big integers and Karatsuba multiplication."""

__version__ = "2.1"
__all__ = ["bigint", "fib", "cli"]