"""Greedy counting problems."""

_MOD = 1_000_000_007


def candy(ratings):
    """Return the fewest candies for children in a row, each getting at
    least one and more than any neighbour with a lower rating."""
    count = len(ratings)
    left = [1] * count
    right = [1] * count
    for i in range(1, count):
        if ratings[i] > ratings[i - 1]:
            left[i] = left[i - 1] + 1
    for i in reversed(range(count - 1)):
        if ratings[i] > ratings[i + 1]:
            right[i] = right[i + 1] + 1
    return sum(max(pair) for pair in zip(left, right))


def max_nice_divisors(prime_factors):
    """Return the largest count of nice divisors a number with at most
    ``prime_factors`` prime factors can have, modulo 1_000_000_007."""
    if prime_factors <= 3:
        return prime_factors
    remainder = prime_factors % 3
    if remainder == 0:
        return pow(3, prime_factors // 3, _MOD)
    if remainder == 1:
        return 4 * pow(3, (prime_factors - 4) // 3, _MOD) % _MOD
    return 2 * pow(3, (prime_factors - 2) // 3, _MOD) % _MOD