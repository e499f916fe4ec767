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


class InvalidLengthError(ValueError):
    def __init__(self, length, msg=None):
        """Raised when the length of the second byte range is negative

        :param length: The rejected length.
        """
        if msg is None:
            msg = 'Length must be non-negative, got: %s' % length
        super(InvalidLengthError, self).__init__(msg)
        self.length = length


class InvalidChecksumError(ValueError):
    """Raised for a malformed S3 checksum digest or an incomplete part"""
