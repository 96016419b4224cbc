"""CSV interchange codec.

Stateless translation between interchange files and RawEntry records; knows
nothing about stores.

Submodules:
    records   - RawEntry, DecodeResult
    tokenizer - Quote-aware record/field state machine
    decoder   - decode() for the RecNo,Label,String format
    encoder   - encode(), category_records(), sample_csv()
    pairs     - decode_pairs() for the legacy key,value format

Python 3.13+.
"""

from .decoder import decode
from .encoder import category_records, encode, encode_field, sample_csv
from .pairs import decode_pairs
from .records import DecodeResult, RawEntry

__all__ = [
    "DecodeResult",
    "RawEntry",
    "category_records",
    "decode",
    "decode_pairs",
    "encode",
    "encode_field",
    "sample_csv",
]
