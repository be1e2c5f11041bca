"""Hypothesis strategies for EncodedBytes.

Requires the ``hypothesis`` extra. Generation and shrinking reuse
hypothesis's own byte strategy, so every generated or shrunk example is a
valid value.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from hypothesis import strategies as st

from encoded_bytes.value import EncodedBytes, wrap


def encoded_bytes_strategy(
    min_size: int = 0, max_size: Optional[int] = None
) -> st.SearchStrategy[EncodedBytes]:
    """Strategy producing EncodedBytes from arbitrary raw bytes.

    Args:
        min_size: Minimum raw length.
        max_size: Maximum raw length, unbounded if None.

    Returns:
        A strategy that shrinks towards the empty value.
    """
    return st.binary(min_size=min_size, max_size=max_size).map(wrap)


def encoded_text_strategy(
    min_size: int = 0, max_size: Optional[int] = None
) -> st.SearchStrategy[str]:
    """Strategy producing valid unpadded base64url text."""
    return encoded_bytes_strategy(min_size, max_size).map(EncodedBytes.encoded_text)


def functions_of(returns: st.SearchStrategy[Any]) -> st.SearchStrategy[Callable[[EncodedBytes], Any]]:
    """Strategy producing pure functions of one EncodedBytes argument.

    Equal arguments (equal raw bytes) always give the same result within a
    test case.

    Args:
        returns: Strategy for the function results.

    Returns:
        A strategy of callables.
    """

    def like(value: EncodedBytes) -> Any:
        ...

    return st.functions(like=like, returns=returns, pure=True)


def register_strategy() -> None:
    """Make ``st.from_type(EncodedBytes)`` use encoded_bytes_strategy."""
    st.register_type_strategy(EncodedBytes, encoded_bytes_strategy())
