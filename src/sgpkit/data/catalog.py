"""Reading and writing TLE catalog files.

A catalog file is a plain ASCII file of three-line TLE records, as
distributed by CelesTrak and Space-Track.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Union

from sgpkit.core.codec import decode_many, encode_many
from sgpkit.core.tle import TLE

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_catalog(path: PathLike) -> list[TLE]:
    """Load every TLE record from a catalog file.

    Args:
        path: Path of the catalog file.

    Returns:
        The records in file order.

    Raises:
        OSError: If the file cannot be read.
        TLEError: If the file content is not a valid TLE batch.
    """
    path = Path(path)
    tles = decode_many(path.read_bytes())
    logger.debug("Loaded %d TLEs from %s", len(tles), path)
    return tles


def save_catalog(path: PathLike, tles: Iterable[TLE]) -> None:
    """Write TLE records to a catalog file, replacing any existing content.

    Raises:
        OSError: If the file cannot be written.
        CannotEncodeAsAscii: If a record holds non-ASCII text.
    """
    path = Path(path)
    data = encode_many(tles)
    path.write_bytes(data)
    logger.debug("Wrote %d bytes of TLE data to %s", len(data), path)
