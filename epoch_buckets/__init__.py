import logging

from .analysis import BucketAnalysis, analyze_buckets
from .assign import address_to_bucket, bucket_of_digest
from .dataset import DatasetError, load_addresses
from .driver import run
from .hashers import HASHERS, get_hasher
from .identifier import Identifier, IdentifierError, parse_identifier

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BucketAnalysis", "analyze_buckets", "address_to_bucket", "bucket_of_digest",
    "DatasetError", "load_addresses", "run", "HASHERS", "get_hasher",
    "Identifier", "IdentifierError", "parse_identifier",
]
