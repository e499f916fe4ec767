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
"""Combine Adler-32 and CRC-64 checksums of adjacent byte ranges.

Usage::

    from checksumcombine import combine_crc64, CRC64_ECMA_POLY

    crc = combine_crc64(CRC64_ECMA_POLY, crc_of_a, crc_of_b, len(b))

"""
import logging

from checksumcombine.constants import CRC64_ECMA_POLY
from checksumcombine.constants import CRC64_ISO_POLY
from checksumcombine.constants import CRC64_NVME_POLY
from checksumcombine.exceptions import InvalidChecksumError
from checksumcombine.exceptions import InvalidLengthError
from checksumcombine.checksums import combine_adler32
from checksumcombine.checksums import combine_crc64
from checksumcombine.checksums import concat_adler32
from checksumcombine.checksums import concat_crc64
from checksumcombine.checksums import reflect_bits
from checksumcombine.checksums import get_combine_function
from checksumcombine.checksums import get_crc64_variant
from checksumcombine.checksums import CRC64Variant
from checksumcombine.checksums import CRC64_ECMA
from checksumcombine.checksums import CRC64_ECMA_182
from checksumcombine.checksums import CRC64_GO_ISO
from checksumcombine.checksums import CRC64_MS
from checksumcombine.checksums import CRC64_NVME
from checksumcombine.checksums import CRC64_REDIS
from checksumcombine.checksums import CRC64_WE
from checksumcombine.checksums import CRC64_XZ
from checksumcombine.s3 import combine_part_checksums
from checksumcombine.s3 import get_full_object_checksum
from checksumcombine.utils import b64_to_checksum
from checksumcombine.utils import checksum_to_b64


__author__ = 'Amazon Web Services'
__version__ = '0.1.0'


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
