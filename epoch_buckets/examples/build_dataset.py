# ==================================================
# examples/build_dataset.py
# ==================================================
import argparse, random
from epoch_buckets.const import IDENTIFIER_SIZE
from epoch_buckets.dataset import dump_addresses
from epoch_buckets.identifier import Identifier

def main():
    p = argparse.ArgumentParser()
    p.add_argument("out", help="path to addresses.json (or .json.zst)")
    p.add_argument("count", type=int)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args()

    rng = random.Random(args.seed)
    addresses = [Identifier(rng.randbytes(IDENTIFIER_SIZE)) for _ in range(args.count)]
    dump_addresses(args.out, addresses)

if __name__ == "__main__":
    main()
