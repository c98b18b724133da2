"""
Tabular input and output

Input: one stem per row in the first column, no header ("pres:παυ").
Output: one row per conjugated code, six fields each, no header.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .config import config
from .errors import PersistenceFailure
from .verb import Verb

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_stems(path: PathLike, delimiter: Optional[str] = None) -> List[str]:
    """Load stem strings from the first column of a delimited file."""
    stems = []
    with open(path, 'r', encoding=config.input_encoding, newline='') as f:
        reader = csv.reader(f, delimiter=delimiter or config.csv_delimiter)
        for row in reader:
            if not row:
                continue
            stem = row[0].strip()
            if stem:
                stems.append(stem)
    logger.debug(f"Loaded {len(stems)} stems from {path}")
    return stems


def write_rows(path: PathLike, rows: Iterable[Sequence[str]],
               delimiter: Optional[str] = None) -> int:
    """
    Write conjugation rows and flush.

    Returns:
        Number of rows written

    Raises:
        PersistenceFailure: if the file cannot be created or written
    """
    count = 0
    try:
        with open(path, 'w', encoding=config.encoding, newline='') as f:
            writer = csv.writer(f, delimiter=delimiter or config.csv_delimiter)
            for row in rows:
                writer.writerow(row)
                count += 1
            f.flush()
    except OSError as err:
        raise PersistenceFailure(path, err) from err

    logger.info(f"Wrote {count} rows to {path}")
    return count


def conjugate_stems(stems: Iterable[str], codes: Optional[List[str]] = None) -> List[List[str]]:
    """
    Conjugate each stem and collect its rows, in input order.

    Without explicit codes each stem uses the defaults for its stem type.
    """
    rows = []
    for stem in stems:
        verb = Verb(stem)
        reqs = codes if codes else verb.default_codes()
        verb.conjugate_requests(reqs)
        rows.extend(verb.rows(reqs))
    return rows


def conjugate_file(infile: PathLike, outfile: PathLike,
                   codes: Optional[List[str]] = None) -> int:
    """Batch mode: read stems from infile, write all their forms to outfile."""
    stems = read_stems(infile)
    logger.info(f"Conjugating {len(stems)} stems from {infile}")
    return write_rows(outfile, conjugate_stems(stems, codes))
