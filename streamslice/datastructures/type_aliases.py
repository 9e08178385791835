"""
Semantic type aliases for streamslice datastructures.

Indexes and counts are plain ints; the aliases only say which of the two
an argument is and in which space it lives.
"""

# Positions and counts in the active unit (lines or bytes)
type UnitIndex = int
type UnitCount = int
type SignedEndpoint = int

# Raw I/O
type ByteCount = int
type ChunkSize = int
type UnitPayload = bytes

# Range expression text as typed on the command line
type RangeText = str
type InputPath = str
