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
GF2_DIM = 64
CRC64_MASK = 0xFFFFFFFFFFFFFFFF

# Largest prime smaller than 65536.
ADLER32_MOD = 65521
ADLER32_EMPTY = 1

# Reflected (LSB-first) forms of the CRC-64 generator polynomials, as used
# by Go's hash/crc64 and by S3.
CRC64_ECMA_POLY = 0xC96C5795D7870F42
CRC64_ISO_POLY = 0xD800000000000000
CRC64_NVME_POLY = 0x9A6C9329AC4BC9B5
