"""String and integer manipulation problems."""

from __future__ import annotations

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``."""
    size = len(s)
    if size == 0:
        return ""
    best = (0, 0)
    palindrome = [[False] * size for _ in range(size)]
    for i in range(size):
        palindrome[i][i] = True
        if i + 1 < size and s[i] == s[i + 1]:
            palindrome[i][i + 1] = True
            best = (i, i + 1)
    # Fill bottom-up so each cell's inner neighbour is already known.
    for i in range(size - 3, -1, -1):
        for j in range(i + 2, size):
            if palindrome[i + 1][j - 1] and s[i] == s[j]:
                palindrome[i][j] = True
                if j - i + 1 > best[1] - best[0]:
                    best = (i, j)
    return s[best[0]:best[1] + 1]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 2:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    row, step = 0, -1
    for char in s:
        rows[row].append(char)
        if row in (0, num_rows - 1):
            step = -step
        row += step
    return "".join("".join(chars) for chars in rows)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of a 32-bit integer, or return 0 on overflow."""
    if not INT32_MIN <= x <= INT32_MAX:
        raise ValueError(f"{x} is not a 32-bit signed integer")
    reversed_abs = int(str(abs(x))[::-1])
    if reversed_abs > INT32_MAX:
        return 0
    return -reversed_abs if x < 0 else reversed_abs