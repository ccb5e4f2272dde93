from fcompare.core.models import CompareMethod, SUPPORTED_ALGORITHMS

METHOD_CHOICES = [method.value for method in CompareMethod]

METHOD_HELP_TEXT = (
    "Method used to compare files:\n"
    "  size     : Byte count only (no content read)\n"
    "  partial  : Hash of first, middle and last 1 MiB (whole file up to 16 MiB)\n"
    "  full     : Hash of the entire file\n"
    "Default: partial"
)

ALGORITHM_CHOICES = list(SUPPORTED_ALGORITHMS)

ALGORITHM_HELP_TEXT = (
    "Hash algorithm for partial/full methods:\n"
    "  sha256   : SHA-256 (default)\n"
    "  xxh64    : xxHash64, faster, not cryptographic;\n"
    "             fingerprints are not comparable with sha256 ones"
)

EPILOG_TEXT = """
Examples:
  Show size, times and partial checksum of a file
  %(prog)s run01.raw

  Same as above as JSON, one object per line
  %(prog)s --json run01.raw run02.raw

  Check whether two files are the same using the full content
  %(prog)s --compare -c full run01.raw backup/run01.raw

  Group files that are the same, fail if access times can't be kept
  %(prog)s --group --check-atime a.raw b.raw c.raw
"""
