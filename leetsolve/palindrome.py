"""Decide whether an integer reads the same in both directions."""


def is_palindrome(x: int) -> bool:
    """Return True if the decimal digits of ``x`` form a palindrome.

    Negative numbers are never palindromes. Only half of the digits are
    reversed, without converting to a string.
    """
    if x < 0:
        return False
    if x % 10 == 0 and x != 0:
        return False
    reversed_half = 0
    while x > reversed_half:
        x, digit = divmod(x, 10)
        reversed_half = reversed_half * 10 + digit
    return x == reversed_half or x == reversed_half // 10