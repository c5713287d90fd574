import argparse
import logging.config
import os
import tempfile
import zlib
from typing import Any, Callable, Iterable, Iterator, Optional

import psutil

from chained_hash.chained_hash_set import ChainedHashSet
from chained_hash.config import LOGGING
from chained_hash.logger.log_types import LogEvent
from chained_hash.logger.logger import log_dedupe_event

BUFFER_SIZE = 1 << 20


def get_memory_usage_mb() -> float:
    """Return current process RSS memory usage in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1e6


def dedupe_lines(lines: Iterable[str], hash_function: Optional[Callable[[Any], int]] = None) -> Iterator[str]:
    seen = ChainedHashSet(hash_function=hash_function)
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def partition_file(input_path: str, partition_dir: str, partitions: int) -> list[str]:
    """Split input into files keyed by crc32(line) so duplicates share a partition."""
    os.makedirs(partition_dir, exist_ok=True)
    paths = [os.path.join(partition_dir, f"partition_{i}.txt") for i in range(partitions)]
    outputs = [open(path, "w", buffering=BUFFER_SIZE) for path in paths]
    try:
        with open(input_path, "r") as fin:
            for line in fin:
                idx = zlib.crc32(line.encode("utf-8", "ignore")) % partitions
                outputs[idx].write(line)
    finally:
        for f in outputs:
            f.close()
    return paths


def _dedupe_into(
    input_path: str,
    fout,
    hash_function: Optional[Callable[[Any], int]],
    stream: bool = False
) -> int:
    """Dedupe one file into fout; partition files are read whole, a lone input is streamed."""
    log_dedupe_event(LogEvent.DEDUPE_STARTED, input_path, memory_mb=get_memory_usage_mb())
    lines_read = 0

    def counted(lines: Iterable[str]) -> Iterator[str]:
        nonlocal lines_read
        for line in lines:
            lines_read += 1
            yield line

    unique = 0
    with open(input_path, "r", buffering=BUFFER_SIZE) as fin:
        lines = fin if stream else fin.readlines()
        for line in dedupe_lines(counted(lines), hash_function):
            fout.write(line)
            unique += 1
    log_dedupe_event(
        LogEvent.PARTITION_DEDUPLICATED, input_path,
        lines=lines_read, unique=unique, memory_mb=get_memory_usage_mb()
    )
    return unique


def dedupe_file(
    input_file: str,
    output_file: str,
    partitions: int = 1,
    hash_function: Optional[Callable[[Any], int]] = None
) -> int:
    """
    remove duplicate lines from a text file and return how many unique lines were written.
    a single partition is streamed line by line. with more than one partition:
     1. partition into hash-based files.
     2. deduplicate each partition in memory.
     3. concatenate the results in partition order.
    """
    if partitions < 1:
        raise ValueError(f"partitions must be at least 1, got {partitions}")

    unique = 0
    with open(output_file, "w", buffering=BUFFER_SIZE) as fout:
        if partitions == 1:
            unique = _dedupe_into(input_file, fout, hash_function, stream=True)
        else:
            with tempfile.TemporaryDirectory(prefix="dedupe_") as temp_root:
                for path in partition_file(input_file, temp_root, partitions):
                    unique += _dedupe_into(path, fout, hash_function)

    log_dedupe_event(LogEvent.DEDUPE_FINISHED, output_file, unique=unique)
    return unique


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Remove duplicate lines from a text file."
    )
    parser.add_argument(
        "-i",
        "--input_file",
        required=True,
        type=str,
        help="Path to the text file to deduplicate",
    )
    parser.add_argument(
        "-o",
        "--output_file",
        required=True,
        type=str,
        help="Path where deduplicated lines will be written",
    )
    parser.add_argument(
        "-p",
        "--partitions",
        type=int,
        default=1,
        help="Number of hash partitions to use (more partitions, less RAM per partition)",
    )
    args = parser.parse_args(argv)

    logging.config.dictConfig(LOGGING)
    dedupe_file(args.input_file, args.output_file, partitions=args.partitions)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
