from dataclasses import dataclass, field
import json
from typing import Any, List

from tqdm import tqdm

from gamma_code.errors import InvalidInputError
from gamma_code.packing import (
    pack_rising,
    pack_sequence,
    unpack_rising,
    unpack_sequence,
)


@dataclass
class PackConfig:
    input_path: str
    output_path: str
    rising: bool = field(default=True)
    progress: bool = field(default=True)


def _iterate(items: List[Any], progress: bool):
    if progress:
        return tqdm(items)
    return items


def _load_json(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"{path} is not valid JSON: {e}") from e


def pack_batch(
    sequences: List[List[int]],
    rising: bool = True,
    progress: bool = False
) -> List[bytes]:
    """
    Encode every sequence and pack it into bytes

    Parameters:
        sequences: List[List[int]]
            Sequences of integers
        rising: bool
            Use rising-sequence codec [default],
            otherwise codec of positive integers
        progress: bool
            Show progress bar

    Returns:
        List[bytes]
        Packed sequences in the same order

    """
    if not isinstance(sequences, list):
        raise InvalidInputError(
            f"Expected list of sequences, got {type(sequences).__name__}")
    pack = pack_rising if rising else pack_sequence
    return [pack(ns) for ns in _iterate(sequences, progress)]


def unpack_batch(
    buffers: List[bytes],
    rising: bool = True,
    progress: bool = False
) -> List[List[int]]:
    unpack = unpack_rising if rising else unpack_sequence
    return [unpack(buffer) for buffer in _iterate(buffers, progress)]


def pack_file(config: PackConfig) -> int:
    """
    Read JSON array of integer arrays from `config.input_path`,
    pack each of them and save hex strings of the packed bytes
    as `{"data": [...]}` to `config.output_path`

    Returns:
        int
        Number of packed sequences

    """
    sequences = _load_json(config.input_path)

    packed = pack_batch(
        sequences, rising=config.rising, progress=config.progress)

    with open(config.output_path, "w", encoding="utf-8") as f:
        json.dump({"data": [buffer.hex() for buffer in packed]}, f)

    return len(packed)


def unpack_file(config: PackConfig) -> int:
    """
    Inverse of `pack_file`: read `{"data": [...]}` from
    `config.input_path` and save JSON array of decoded
    sequences to `config.output_path`

    """
    packed = _load_json(config.input_path)

    if not isinstance(packed, dict) or not isinstance(packed.get("data"), list):
        raise InvalidInputError(
            f"{config.input_path} must contain object with `data` list")
    try:
        buffers = [bytes.fromhex(item) for item in packed["data"]]
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f"{config.input_path} contains malformed hex string: {e}") from e

    sequences = unpack_batch(
        buffers, rising=config.rising, progress=config.progress)

    with open(config.output_path, "w", encoding="utf-8") as f:
        json.dump(sequences, f)

    return len(sequences)
