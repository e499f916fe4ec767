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
"""Full-object CRC-64/NVME checksums for S3 multipart uploads.

S3 reports a ``ChecksumCRC64NVME`` for every uploaded part. The checksum of
the whole object follows from those and the part sizes alone.
"""
import logging

import botocore.session

from checksumcombine.checksums import CRC64_NVME
from checksumcombine.exceptions import InvalidChecksumError
from checksumcombine.utils import b64_to_checksum
from checksumcombine.utils import checksum_to_b64


logger = logging.getLogger(__name__)

CHECKSUM_MEMBER = 'ChecksumCRC64NVME'


def combine_part_checksums(parts):
    """Compute the full-object checksum from S3 part descriptions

    :type parts: list
    :param parts: Part dictionaries in part number order, each with a
        ``Size`` and a ``ChecksumCRC64NVME`` as returned by ``ListParts``.

    :rtype: str
    :returns: The base64 encoded ``ChecksumCRC64NVME`` of the object.
    """
    return checksum_to_b64(CRC64_NVME.concat(_get_part_checksums(parts)))


def _get_part_checksums(parts):
    for part in parts:
        if CHECKSUM_MEMBER not in part:
            raise InvalidChecksumError(
                'Part %s does not have a %s' % (
                    part.get('PartNumber'), CHECKSUM_MEMBER))
        if 'Size' not in part:
            raise InvalidChecksumError(
                'Part %s does not have a Size' % part.get('PartNumber'))
        yield b64_to_checksum(part[CHECKSUM_MEMBER]), part['Size']


def get_full_object_checksum(bucket, key, upload_id, client=None,
                             client_kwargs=None, extra_args=None):
    """List the parts of a multipart upload and combine their checksums

    :param bucket: The bucket of the multipart upload.
    :param key: The key of the multipart upload.
    :param upload_id: The id of the multipart upload.
    :param client: A botocore S3 client. One is created from a new botocore
        session when not provided.
    :param client_kwargs: Keyword arguments for ``create_client`` when no
        client is provided.
    :param extra_args: Extra arguments for the ``ListParts`` calls, such as
        ``RequestPayer``.

    :rtype: str
    :returns: The base64 encoded ``ChecksumCRC64NVME`` of the object.
    """
    if client is None:
        client = botocore.session.get_session().create_client(
            's3', **(client_kwargs or {}))
    if extra_args is None:
        extra_args = {}

    paginator = client.get_paginator('list_parts')
    parts = []
    for page in paginator.paginate(
            Bucket=bucket, Key=key, UploadId=upload_id, **extra_args):
        parts.extend(page.get('Parts', []))
    parts.sort(key=lambda part: part['PartNumber'])
    logger.debug('Combining %s part checksums for upload %s of s3://%s/%s',
                 len(parts), upload_id, bucket, key)
    return combine_part_checksums(parts)
