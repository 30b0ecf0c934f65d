"""
services/similarity.py

Levenshtein edit distance between two strings.
"""

from typing import List


def edit_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions that turn `a` into `b`.

    Standard (len(a)+1) x (len(b)+1) dynamic-programming table.
    O(len(a) * len(b)) time and memory.
    """
    rows, cols = len(a) + 1, len(b) + 1
    dp: List[List[int]] = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        dp[i][0] = i
    for j in range(cols):
        dp[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,         # deletion
                dp[i][j - 1] + 1,         # insertion
                dp[i - 1][j - 1] + cost,  # substitution
            )

    return dp[rows - 1][cols - 1]
