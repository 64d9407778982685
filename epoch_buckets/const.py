# ==================================================
# epoch_buckets/const.py
# ==================================================
BUCKETS = 100                 # buckets every identifier is spread across
EPOCHS = 1000                 # seeds 0..EPOCHS-1, one pass each
IDENTIFIER_SIZE = 32          # raw pubkey length in bytes
SEED_MAX = 2**64 - 1          # seeds are u64
DIGEST_FMT = "<Q"             # first 8 bytes of a digest, little-endian
DIGEST_SPACE = 2**64          # finish() always lands in [0, DIGEST_SPACE)

DATASET_PATH = "./addresses.json"

# build-time selection; the remaining registry entries stay available
ENABLED_HASHERS = (
    # "siphash24",
    # "siphash13",
    # "xxh64",
    # "murmur3",
    # "blake2b",
    "blake3",
)

CSV_HEADER = "epoch,min,max,spread,mean,median,mode,mode_count,std_dev"
