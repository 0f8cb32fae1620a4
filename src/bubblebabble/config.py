# Shared encoding constants

VOWELS = "aeiouy"
CONSONANTS = "bcdfghklmnprstvzx"

# Framing character at both ends, and the word separator
FRAME_CHAR = "x"
SEPARATOR = "-"

# Rolling checksum: initial value, restart value for stable blocks, modulus
CHECKSUM_SEED = 1
BLOCK_SEED = 0
CHECKSUM_MODULUS = 36

# Consonant slot used by the closing group of an even-length input
CLOSING_CONSONANT_INDEX = 16

# --- Stable (fixed-block) output ---
DEFAULT_BLOCK_SIZE = 2
ZERO_WORD = "babab"
ZERO_TOKEN = "wa"

# --- Fingerprints ---
# OpenSSH `ssh-keygen -B` babbles the SHA-1 of the key blob.
DEFAULT_DIGEST = "sha1"
SUPPORTED_DIGESTS = ("sha1", "sha256", "md5", "blake3")

# --- Environment ---
# These can be overridden per process; the CLI reads them through click.
LOG_LEVEL_ENV = "BUBBLEBABBLE_LOG_LEVEL"
DIGEST_ENV = "BUBBLEBABBLE_DIGEST"
DEFAULT_LOG_LEVEL = "WARNING"
