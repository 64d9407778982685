# ==================================================
# epoch_buckets/assign.py
# ==================================================
from .const import DIGEST_SPACE


def bucket_of_digest(buckets: int, h: int) -> int:
    # floor(buckets * h / 2**64); exact for every u64 digest, so h = 2**64-1 maps below `buckets`
    return (buckets * h) // DIGEST_SPACE


def address_to_bucket(buckets: int, hasher, address) -> int:
    """Feed ``address`` into a freshly cloned ``hasher`` and map its digest to a bucket."""
    hasher.write(bytes(address))
    return bucket_of_digest(buckets, hasher.finish())
