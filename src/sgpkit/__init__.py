"""
sgpkit — TLE records, codec and SGP4 propagation for Python.

Decode Two-Line Element sets from ASCII buffers, validate their structure,
and turn a record plus an instant into the satellite's geodetic position
and speed.
"""

from __future__ import annotations

__version__ = "0.1.0.dev0"

from sgpkit.core.tle import TLE
from sgpkit.core.codec import decode_one, decode_many, encode, encode_many
from sgpkit.core.coordinates import Observer, LookAngles
from sgpkit.core.propagation import (
    Epoch,
    SatelliteState,
    StateVector,
    compute_state,
    compute_states,
    look_angles,
    propagate,
)
from sgpkit.data.catalog import load_catalog, save_catalog
from sgpkit.exceptions import (
    CannotEncodeAsAscii,
    DecodeError,
    EmptyInput,
    EncodeError,
    EncodingError,
    InvalidElements,
    InvalidLineLength,
    PropagationError,
    PropagationFailure,
    SGPKitError,
    TLEError,
    WrongLineCount,
)

__all__ = [
    "__version__",
    "TLE",
    "decode_one",
    "decode_many",
    "encode",
    "encode_many",
    "Observer",
    "LookAngles",
    "Epoch",
    "SatelliteState",
    "StateVector",
    "compute_state",
    "compute_states",
    "look_angles",
    "propagate",
    "load_catalog",
    "save_catalog",
    "SGPKitError",
    "TLEError",
    "InvalidLineLength",
    "DecodeError",
    "EmptyInput",
    "EncodingError",
    "WrongLineCount",
    "EncodeError",
    "CannotEncodeAsAscii",
    "PropagationError",
    "InvalidElements",
    "PropagationFailure",
]
