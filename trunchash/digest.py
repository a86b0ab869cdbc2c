"""
trunc-digest - compute bit-truncated digests of files or stdin.

Usage:
    python -m trunchash.digest --hash SHA-512 --bits 100 file1 file2
    cat file | python -m trunchash.digest --bits 12 --json
"""

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from trunchash.common import config, utils
from trunchash.common.models import DigestRecord, serialize_record
from trunchash.crypto.hash import AlgorithmNotFound, available_hashes, create_hash
from trunchash.crypto.trunc_hash import InvalidConfiguration, TruncatedHash

logger = logging.getLogger(__name__)


def hash_stream(h: TruncatedHash, stream: BinaryIO, chunk_size: int = config.CHUNK_SIZE) -> bytes:
    """
    Feed a binary stream through `h` chunk by chunk and finalize.

    Args:
        h: truncated hash (left in the empty state afterwards)
        stream: binary file object
        chunk_size: read size in bytes

    Returns:
        truncated digest
    """
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        h.update(chunk)
    return h.finalize()


def digest_sources(h: TruncatedHash, sources: List[str]) -> List[DigestRecord]:
    """
    Digest every source ("-" means stdin) with an independent copy of `h`.

    Returns:
        one DigestRecord per source, in order
    """
    records = []
    for source in sources:
        with h.fresh_instance() as worker:
            if source == "-":
                digest = hash_stream(worker, sys.stdin.buffer)
            else:
                with open(source, 'rb') as f:
                    digest = hash_stream(worker, f)
        logger.debug(f"Digested {source} with {worker.name}")
        records.append(DigestRecord(
            algorithm=worker.name,
            output_bits=worker.output_bits,
            digest=digest.hex(),
            source=source,
        ))
    return records


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trunc-digest",
        description="Compute digests truncated to an arbitrary number of bits"
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=["-"],
        help="Files to hash ('-' or nothing for stdin)"
    )
    parser.add_argument(
        "--hash",
        default=config.DEFAULT_HASH,
        help=f"Base hash function (default: {config.DEFAULT_HASH})"
    )
    parser.add_argument(
        "--bits",
        type=int,
        default=config.DEFAULT_OUTPUT_BITS,
        help=f"Output length in bits (default: {config.DEFAULT_OUTPUT_BITS})"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit one JSON record per input"
    )
    parser.add_argument(
        "--expect",
        help="Expected hex digest; exit 1 if any input differs"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available hash functions and exit"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for trunc-digest. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s [%(levelname)s] %(message)s'
    )

    if args.list:
        for name in available_hashes():
            print(name)
        return 0

    try:
        h = TruncatedHash(create_hash(args.hash), args.bits)
    except (AlgorithmNotFound, InvalidConfiguration) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        records = digest_sources(h, args.files)
    except OSError as e:
        logger.error(f"Failed to read input: {e}")
        return 1
    finally:
        h.close()

    ok = True
    for record in records:
        if args.json:
            print(serialize_record(record))
        else:
            print(f"{record.digest}  {record.source}")

        if args.expect is not None and not utils.constant_time_compare(
            record.digest, args.expect.strip().lower()
        ):
            logger.error(f"Digest mismatch for {record.source}")
            ok = False

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
