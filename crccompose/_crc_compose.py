GZIP_POLYNOMIAL = 0xEDB88320
CASTAGNOLI_POLYNOMIAL = 0x82F63B78

# Polynomials here are "reversed": the top bit is the x^0 place, the bottom bit
# is x^31, and x^32 is implicit.
X_0 = 0x80000000
X_1 = 0x40000000


def multiply(p: int, q: int, m: int) -> int:
    """
    Returns p(x) * q(x) mod m(x), over GF(2).

    `m` is the reversed modulus, with the implicit "1" bit beyond the bottom
    bit.
    """
    summation = 0

    # Each right-shift of cur_term increments the degree of the term of q we
    # look at.
    cur_term = X_0

    # px is p * x^i mod m for the current term x^i.
    px = p

    while cur_term != 0:
        if q & cur_term:
            summation ^= px

        # The bottom bit is the highest degree; if set, multiplying by x gives
        # an x^32 term which cancels with the implicit one in m.
        has_max_degree = px & 1
        px >>= 1
        if has_max_degree:
            px ^= m
        cur_term >>= 1
    return summation


def get_monomial(length_bytes: int, m: int) -> int:
    """
    Returns x^(length_bytes * 8) mod m.

    A zero length gives 0 rather than x^0, so that composing with an empty
    block leaves the right hand CRC as is.
    """
    if length_bytes < 0:
        raise ValueError(f"Negative length {length_bytes}")
    if length_bytes == 0:
        return 0

    # x^degree == PRODUCT(x^(bit[i] * 2^i)); each x^(2^i) comes from squaring.
    multiplier = X_1
    product = X_0
    degree = length_bytes * 8
    while degree > 0:
        if degree & 1:
            product = multiply(product, multiplier, m)
        multiplier = multiply(multiplier, multiplier, m)
        degree >>= 1
    return product


def compose_with_monomial(crc_a: int, crc_b: int, monomial: int, m: int) -> int:
    """
    `monomial` is the precomputed get_monomial(len(b), m).
    """
    return multiply(crc_a, monomial, m) ^ crc_b


def compose(crc_a: int, crc_b: int, length_b: int, m: int) -> int:
    """
    crc(a + b) == compose(crc(a), crc(b), len(b), m)
    """
    return compose_with_monomial(crc_a, crc_b, get_monomial(length_b, m), m)
