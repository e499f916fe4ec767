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
import base64

from checksumcombine.exceptions import InvalidChecksumError
from checksumcombine.exceptions import InvalidLengthError


def validate_length(length):
    """Reject negative byte counts before any arithmetic is attempted"""
    if length < 0:
        raise InvalidLengthError(length)


def b64_to_checksum(value, width=64):
    """Convert an S3 base64 checksum digest to an integer

    :type value: str
    :param value: The base64 encoded big-endian digest, as found in
        members such as ``ChecksumCRC64NVME``.

    :type width: int
    :param width: The width of the checksum in bits.

    :rtype: int
    :returns: The checksum value.
    """
    try:
        digest = base64.b64decode(value, validate=True)
    except (TypeError, ValueError) as e:
        raise InvalidChecksumError(
            'Invalid base64 checksum %r: %s' % (value, e))
    if len(digest) != width // 8:
        raise InvalidChecksumError(
            'Expected a %s byte digest, got %s bytes: %r' % (
                width // 8, len(digest), value))
    return int.from_bytes(digest, byteorder='big')


def checksum_to_b64(checksum, width=64):
    """Convert an integer checksum to an S3 base64 checksum digest"""
    digest = (checksum & ((1 << width) - 1)).to_bytes(
        width // 8, byteorder='big')
    return base64.b64encode(digest).decode('ascii')
