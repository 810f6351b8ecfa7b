# fileDiff.py

import logging

CHUNK_SIZE = 1024  # Default number of bytes read from each file per step

logger = logging.getLogger(__name__)


def _check_chunk_size(chunk_size):
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")


def _read_chunk(file, chunk_size):
    """
    Reads up to chunk_size bytes from a stream, re-reading after short reads.

    Raw streams and pipes may hand back fewer bytes than asked for before they
    reach the end, so keep reading until the chunk is full or a read comes back empty.

    Args:
        file: An open readable stream.
        chunk_size (int): The number of bytes wanted.

    Returns:
        bytes: The chunk read, shorter than chunk_size only at the end of the stream.
    """
    chunk = file.read(chunk_size)
    if not chunk or len(chunk) == chunk_size:
        return chunk

    parts = [chunk]
    missing = chunk_size - len(chunk)
    while missing > 0:
        more = file.read(missing)
        if not more:
            break
        parts.append(more)
        missing -= len(more)
    return chunk[:0].join(parts)


def _compare_streams(file1, file2, chunk_size):
    offset = 0  # Track the byte offset in the files

    while True:
        data1 = _read_chunk(file1, chunk_size)
        data2 = _read_chunk(file2, chunk_size)

        if len(data1) != len(data2):
            logger.debug(f"Difference found: files have different lengths (after byte {offset}).")
            return False
        if not data1:
            # Both files reached EOF together
            return True
        if data1 != data2:
            logger.debug(f"Difference found in the chunk starting at byte {offset}.")
            return False

        offset += len(data1)


def diff_files(file1, file2, chunk_size=CHUNK_SIZE):
    """
    Compare the contents of two open binary streams.

    Both streams are read forward in lockstep, chunk_size bytes at a time, so
    memory use does not grow with the size of the files. The streams are left
    open; closing them is up to the caller.

    A read error on either stream is reported as a difference: the function
    returns False instead of raising.

    Args:
        file1: The first open readable stream, positioned at its start.
        file2: The second open readable stream, positioned at its start.
        chunk_size (int): Number of bytes read from each stream per step.

    Returns:
        bool: True if both streams hold exactly the same bytes, False otherwise.

    Raises:
        ValueError: If chunk_size is smaller than 1.
    """
    _check_chunk_size(chunk_size)

    try:
        return _compare_streams(file1, file2, chunk_size)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read files for comparison: {e}")
        return False


def diff(file1_path, file2_path, chunk_size=CHUNK_SIZE):
    """
    Compare two files on disk byte by byte.

    Args:
        file1_path (str): Path to the first file.
        file2_path (str): Path to the second file.
        chunk_size (int): Number of bytes read from each file per step.

    Returns:
        bool: True if both files exist, can be read and are identical.
              A file that cannot be opened makes the result False.

    Raises:
        ValueError: If chunk_size is smaller than 1.
    """
    _check_chunk_size(chunk_size)

    try:
        with open(file1_path, 'rb') as file1, open(file2_path, 'rb') as file2:
            return diff_files(file1, file2, chunk_size)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not open {file1_path!r} and {file2_path!r} for comparison: {e}")
        return False
