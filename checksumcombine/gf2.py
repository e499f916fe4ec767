# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
# http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
"""Linear operators over GF(2) for CRC-64 registers.

A matrix is a list of ``GF2_DIM`` integer rows where row ``i`` is the image
of input bit ``i``. Feeding one zero bit through a CRC register is such an
operator, so feeding ``n`` zero bytes is that operator raised to ``8 * n``.
"""
from checksumcombine.constants import CRC64_MASK
from checksumcombine.constants import GF2_DIM


def gf2_matrix_times(matrix, vector):
    """Multiply a matrix by a vector in GF(2)

    :type matrix: list
    :param matrix: The rows of the operator.

    :type vector: int
    :param vector: The bit vector to transform. Must fit in ``GF2_DIM``
        bits.

    :rtype: int
    :returns: The image of ``vector`` under ``matrix``.
    """
    result = 0
    index = 0
    while vector:
        if vector & 1:
            result ^= matrix[index]
        vector >>= 1
        index += 1
    return result


def gf2_matrix_square(matrix):
    """Square a matrix in GF(2)"""
    return [gf2_matrix_times(matrix, row) for row in matrix]


def zero_bit_operator(polynomial, reflected=True):
    """Build the operator that clocks one zero bit through a CRC register

    :type polynomial: int
    :param polynomial: The generator polynomial. Reflected registers take
        the bit-reversed form, MSB-first registers the normal form.

    :type reflected: bool
    :param reflected: Whether the register shifts toward the low bit.

    :rtype: list
    :returns: A ``GF2_DIM`` by ``GF2_DIM`` matrix.
    """
    polynomial &= CRC64_MASK
    if reflected:
        # Bit 0 falls off and feeds back the polynomial, bit i moves to i - 1.
        return [polynomial] + [1 << n for n in range(GF2_DIM - 1)]
    # The top bit falls off and feeds back the polynomial, bit i moves to
    # i + 1.
    return [1 << (n + 1) for n in range(GF2_DIM - 1)] + [polynomial]


def zero_byte_operators(polynomial, reflected=True):
    """Yield the operators for 1, 2, 4, 8, ... zero bytes

    Two operator slots are alternately squared into each other, each
    square doubling the run of zeros the operator stands for. The
    generator never ends; callers stop consuming once done.
    """
    odd = zero_bit_operator(polynomial, reflected)
    # Two zero bits in even, then four zero bits in odd.
    even = gf2_matrix_square(odd)
    odd = gf2_matrix_square(even)
    while True:
        even = gf2_matrix_square(odd)
        yield even
        odd = gf2_matrix_square(even)
        yield odd
