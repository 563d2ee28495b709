"""Packaged executable protocol constants.

Single source of truth for the trailer magic and layout.
The packer appends the trailer last; readers must match it byte for byte.
"""

# Trailer magic
MAGIC_TRAILER = b"d3n0l4nd"

# Trailer: [Magic(8) | BundleOffset(8) | MetadataOffset(8)] = 24 bytes, big-endian
TRAILER_FMT = ">8sQQ"
TRAILER_LEN = 24
OFFSET_LEN = 8

# Output naming
DEFAULT_OUTPUT = "source"
SOURCE_SUFFIX = ".ts"
