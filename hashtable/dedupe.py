import os
import argparse
import zlib
from contextlib import ExitStack
from typing import Callable, Iterable, Iterator, Optional

import psutil

from hashtable.config import DEFAULT_DEDUPE_BUCKETS, configure_logging
from hashtable.hash_set import HashSet
from hashtable.logger.log_types import LogEvent
from hashtable.logger.logger import log_dedupe_event

IO_BUFFER = 1 << 20


def line_hash(line: str) -> int:
    return zlib.crc32(line.encode("utf-8", "ignore"))


def get_memory_usage() -> int:
    """Return current process RSS memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def terminated(lines: Iterable[str]) -> Iterator[str]:
    # a final line without "\n" is the same line as one with it
    for line in lines:
        yield line if line.endswith("\n") else line + "\n"


def _bucket_path(directory: str, index: int, suffix: str = "txt") -> str:
    return os.path.join(directory, f"bucket_{index}.{suffix}")


def partition_file(input_path: str, bucket_dir: str, num_buckets: int) -> None:
    """Spread the lines of ``input_path`` over ``num_buckets`` files by crc32."""
    os.makedirs(bucket_dir, exist_ok=True)
    with ExitStack() as stack:
        buckets = [
            stack.enter_context(open(_bucket_path(bucket_dir, i), "w", buffering=IO_BUFFER))
            for i in range(num_buckets)
        ]
        fin = stack.enter_context(open(input_path, "r"))
        for line in terminated(fin):
            buckets[line_hash(line) % num_buckets].write(line)


def dedupe_bucket(
    bucket_path: str,
    deduped_path: str,
    bucket_index: int,
    hash_function: Optional[Callable[[str], int]] = None
) -> int:
    """Write the first occurrence of every line in ``bucket_path``; return the unique count."""
    with open(bucket_path, "r", buffering=IO_BUFFER) as fin:
        lines = fin.readlines()

    # lines in one partition share crc32 % num_buckets, so the set must not reuse line_hash
    seen = HashSet(hash_function=hash_function)
    with open(deduped_path, "w", buffering=IO_BUFFER) as fout:
        for line in lines:
            if seen.add(line):
                fout.write(line)

    log_dedupe_event(
        LogEvent.DEDUPE_BUCKET_DONE,
        bucket_index,
        lines=len(lines),
        unique=seen.size(),
        memory_mb=round(get_memory_usage() / 1e6, 2),
    )
    return seen.size()


def dedupe_large_file(
    input_file: str,
    output_file: str,
    num_buckets: int = DEFAULT_DEDUPE_BUCKETS,
    hash_function: Optional[Callable[[str], int]] = None
) -> int:
    """Copy ``input_file`` to ``output_file`` without repeated lines.

    Only one partition is held in a HashSet at a time; the partitions and
    their deduplicated copies live under ``temp_files/`` next to the output.
    Output is grouped by partition, so global line order is not kept.
    Returns the number of lines written.
    """
    if num_buckets <= 0:
        raise ValueError(f"num_buckets must be positive, got {num_buckets}")

    temp_root = os.path.join(os.path.dirname(os.path.abspath(output_file)), "temp_files")
    buckets_dir = os.path.join(temp_root, "buckets")
    deduped_dir = os.path.join(temp_root, "deduplicated")
    os.makedirs(deduped_dir, exist_ok=True)

    log_dedupe_event(LogEvent.DEDUPE_STARTED, input_file=input_file, temp_dir=temp_root)

    partition_file(input_file, buckets_dir, num_buckets)

    unique = sum(
        dedupe_bucket(
            _bucket_path(buckets_dir, i),
            _bucket_path(deduped_dir, i, "dedup.txt"),
            i,
            hash_function,
        )
        for i in range(num_buckets)
    )

    with open(output_file, "w", buffering=IO_BUFFER) as fout:
        for i in range(num_buckets):
            with open(_bucket_path(deduped_dir, i, "dedup.txt"), "r", buffering=IO_BUFFER) as fin:
                fout.writelines(fin)

    log_dedupe_event(LogEvent.DEDUPE_FINISHED, output_file=output_file, unique=unique)
    return unique


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashtable-dedupe",
        description="Drop repeated lines from a text file too large to dedupe in one pass.",
    )
    parser.add_argument("-i", "--input_file", required=True, help="file to read")
    parser.add_argument("-o", "--output_file", required=True, help="file to write the unique lines to")
    parser.add_argument(
        "-b",
        "--buckets",
        type=int,
        default=DEFAULT_DEDUPE_BUCKETS,
        help=f"partition count (default: {DEFAULT_DEDUPE_BUCKETS})",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    dedupe_large_file(
        args.input_file,
        args.output_file,
        num_buckets=args.buckets,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
