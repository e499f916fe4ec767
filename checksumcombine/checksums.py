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
"""Combine checksums of adjacent byte ranges without rehashing the data.

Given the checksum of A, the checksum of B and the length of B, the
functions in this module produce the checksum of A followed by B::

    crc64(AB) == combine_crc64(poly, crc64(A), crc64(B), len(B))
    adler32(AB) == combine_adler32(adler32(A), adler32(B), len(B))

The approach follows ``adler32_combine`` and ``crc32_combine`` from zlib.
"""
import functools
import logging

from checksumcombine.constants import ADLER32_EMPTY
from checksumcombine.constants import ADLER32_MOD
from checksumcombine.constants import CRC64_MASK
from checksumcombine.constants import GF2_DIM
from checksumcombine.gf2 import gf2_matrix_times
from checksumcombine.gf2 import zero_byte_operators
from checksumcombine.utils import validate_length


logger = logging.getLogger(__name__)


def combine_adler32(adler1, adler2, len2):
    """Combine two Adler-32 values.

    Both inputs must be genuine Adler-32 values, that is each of their two
    16 bit sums must already be reduced modulo 65521. The final reduction
    relies on that bound and is not a general modulo.

    :type adler1: int
    :param adler1: Adler-32 of the first byte range.

    :type adler2: int
    :param adler2: Adler-32 of the second byte range.

    :type len2: int
    :param len2: Length of data that produced `adler2`.

    :rtype: int
    :returns: Combined Adler-32 integer value.
    """
    validate_length(len2)

    rem = len2 % ADLER32_MOD
    sum1 = adler1 & 0xFFFF
    sum2 = (rem * sum1) % ADLER32_MOD
    sum1 += (adler2 & 0xFFFF) + ADLER32_MOD - 1
    sum2 += ((adler1 >> 16) & 0xFFFF) + ((adler2 >> 16) & 0xFFFF)
    sum2 += ADLER32_MOD - rem
    if sum1 >= ADLER32_MOD:
        sum1 -= ADLER32_MOD
    if sum1 >= ADLER32_MOD:
        sum1 -= ADLER32_MOD
    if sum2 >= ADLER32_MOD << 1:
        sum2 -= ADLER32_MOD << 1
    if sum2 >= ADLER32_MOD:
        sum2 -= ADLER32_MOD
    return sum1 | (sum2 << 16)


def combine_crc64(polynomial, crc1, crc2, len2, reflected=True):
    """Combine two CRC-64 values.

    Valid for any CRC-64 whose initial register value equals its final
    xor value, which covers ECMA/XZ, GO-ISO, NVME, WE and ECMA-182. Use
    :meth:`CRC64Variant.combine` for the others.

    :type polynomial: int
    :param polynomial: Generator polynomial of the CRC. Bit-reversed
        when ``reflected`` is true.

    :type crc1: int
    :param crc1: Current CRC-64 integer value.

    :type crc2: int
    :param crc2: Second CRC-64 integer value to combine.

    :type len2: int
    :param len2: Length of data that produced `crc2`.

    :type reflected: bool
    :param reflected: Whether the CRC processes bits LSB-first.

    :rtype: int
    :returns: Combined CRC-64 integer value.
    """
    validate_length(len2)

    crc1 &= CRC64_MASK
    crc2 &= CRC64_MASK
    if len2 == 0:
        return crc1 ^ crc2

    # Walk len2 from its lowest bit, applying the operator for 2**k zero
    # bytes whenever bit k is set.
    for operator in zero_byte_operators(polynomial, reflected):
        if len2 & 1:
            crc1 = gf2_matrix_times(operator, crc1)
        len2 >>= 1
        if not len2:
            break
    return crc1 ^ crc2


def reflect_bits(value, width=GF2_DIM):
    """Reverse the order of the low ``width`` bits of ``value``"""
    result = 0
    for _ in range(width):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


def _concat(combine, parts, initial):
    combined = initial
    num_parts = 0
    total_length = 0
    for checksum, length in parts:
        combined = combine(combined, checksum, length)
        num_parts += 1
        total_length += length
    logger.debug('Concatenated %s checksums covering %s bytes.',
                 num_parts, total_length)
    return combined


def concat_adler32(parts):
    """Fold ``(adler32, length)`` pairs, in order, into one Adler-32 value

    An empty iterable yields the Adler-32 of no data.
    """
    return _concat(combine_adler32, parts, ADLER32_EMPTY)


def concat_crc64(polynomial, parts, reflected=True):
    """Fold ``(crc64, length)`` pairs, in order, into one CRC-64 value

    The same restriction as :func:`combine_crc64` applies: the CRC's
    initial value must equal its final xor value, so the CRC of no data
    is zero.
    """
    combine = functools.partial(
        combine_crc64, polynomial, reflected=reflected)
    return _concat(combine, parts, 0)


class CRC64Variant(object):
    def __init__(self, name, polynomial, reflected=True,
                 init=CRC64_MASK, xor_out=CRC64_MASK, check=None):
        """Parameters of a CRC-64 algorithm

        :param name: The catalogue name of the algorithm, e.g.
            ``CRC-64/XZ``.

        :param polynomial: The generator polynomial in normal (MSB-first)
            form, without the implicit x**64 term. It is bit-reversed
            internally for reflected algorithms.

        :param reflected: Whether input and output are reflected, i.e. the
            register shifts toward the low bit.

        :param init: The initial register value.

        :param xor_out: The value xored into the register to produce the
            checksum.

        :param check: The checksum of ``b'123456789'``.
        """
        self.name = name
        self.polynomial = polynomial & CRC64_MASK
        self.reflected = reflected
        self.init = init & CRC64_MASK
        self.xor_out = xor_out & CRC64_MASK
        self.check = check

    def __repr__(self):
        return '%s(name=%r)' % (self.__class__.__name__, self.name)

    @property
    def operator_polynomial(self):
        """The polynomial in the orientation the register shifts in"""
        if self.reflected:
            return reflect_bits(self.polynomial, GF2_DIM)
        return self.polynomial

    @property
    def empty_checksum(self):
        """The checksum of no data"""
        return self.init ^ self.xor_out

    def combine(self, crc1, crc2, len2):
        """Combine two checksums computed with this variant

        The register state after the first range is ``crc1 ^ xor_out``,
        while the second checksum was computed starting from ``init``.
        Offsetting ``crc1`` by ``init ^ xor_out`` before shifting in the
        zeros accounts for both.
        """
        return combine_crc64(
            self.operator_polynomial, crc1 ^ self.empty_checksum, crc2, len2,
            reflected=self.reflected)

    def concat(self, parts):
        """Fold ``(crc64, length)`` pairs, in order, into one checksum"""
        return _concat(self.combine, parts, self.empty_checksum)


CRC64_XZ = CRC64_ECMA = CRC64Variant(
    'CRC-64/XZ', 0x42F0E1EBA9EA3693, check=0x995DC9BBDF1939FA)
CRC64_GO_ISO = CRC64Variant(
    'CRC-64/GO-ISO', 0x000000000000001B, check=0xB90956C775A41001)
CRC64_NVME = CRC64Variant(
    'CRC-64/NVME', 0xAD93D23594C93659, check=0xAE8B14860A799888)
CRC64_ECMA_182 = CRC64Variant(
    'CRC-64/ECMA-182', 0x42F0E1EBA9EA3693, reflected=False,
    init=0, xor_out=0, check=0x6C40DF5F0B497347)
CRC64_WE = CRC64Variant(
    'CRC-64/WE', 0x42F0E1EBA9EA3693, reflected=False,
    check=0x62EC59E3F1A4F00A)
CRC64_MS = CRC64Variant(
    'CRC-64/MS', 0x259C84CBA6426349, xor_out=0, check=0x75D4B74F024ECEEA)
CRC64_REDIS = CRC64Variant(
    'CRC-64/REDIS', 0xAD93D23594C935A9, init=0, xor_out=0,
    check=0xE9C6D914C4B8D9CA)

_CRC64_VARIANTS = {
    'crc-64/xz': CRC64_XZ,
    'crc-64/ecma': CRC64_ECMA,
    'crc-64/go-ecma': CRC64_ECMA,
    'crc-64/go-iso': CRC64_GO_ISO,
    'crc-64/iso': CRC64_GO_ISO,
    'crc-64/nvme': CRC64_NVME,
    'crc-64/ecma-182': CRC64_ECMA_182,
    'crc-64/we': CRC64_WE,
    'crc-64/ms': CRC64_MS,
    'crc-64/redis': CRC64_REDIS,
}


def get_crc64_variant(name):
    """Look up a predefined CRC-64 variant by name, case-insensitively"""
    try:
        return _CRC64_VARIANTS[name.lower()]
    except KeyError:
        raise ValueError(
            'Unknown CRC-64 variant %r, expected one of: %s' % (
                name, ', '.join(sorted(_CRC64_VARIANTS))))


_CRC_CHECKSUM_TO_COMBINE_FUNCTION = {
    "ChecksumCRC64NVME": CRC64_NVME.combine,
}


def get_combine_function(algorithm):
    """Get the combine function for an S3 checksum member name

    :type algorithm: str
    :param algorithm: The response member carrying the checksum, e.g.
        ``ChecksumCRC64NVME``.

    :returns: A function taking ``(crc1, crc2, len2)``.
    """
    try:
        return _CRC_CHECKSUM_TO_COMBINE_FUNCTION[algorithm]
    except KeyError:
        raise ValueError(
            'Checksum algorithm %r cannot be combined, supported: %s' % (
                algorithm, ', '.join(_CRC_CHECKSUM_TO_COMBINE_FUNCTION)))
