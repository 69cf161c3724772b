# -*- coding: utf-8 -*-
"""
I/O helpers for loading cutting problem definitions.

This module includes lightweight JSON readers that match the
`problems/problem_*/{rods.json, pieces.json}` structure.

JSON formats:
- rods.json    : [{"id": "...", "length": <number>}, ...]
- pieces.json  : [{"id": "...", "length": <number>}, ...]

These map directly to:
- business_objects.rods.RodSpec
- business_objects.pieces.Piece
"""

from __future__ import annotations
import json
from typing import Any, List

from rodcut.business_objects.errors import SchemaError
from rodcut.business_objects.pieces import Piece
from rodcut.business_objects.rods import RodSpec
from rodcut.planning import CuttingState


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _load_array(path: str) -> List[Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")
    return data


def _length_of(obj: dict, path: str) -> float:
    raw = _require(obj, "length", path)
    # bool is a JSON literal, not a length
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise SchemaError(f"{path}: 'length' must be a number, got {raw!r}")
    return raw


def read_rods_json(path: str) -> List[RodSpec]:
    """
    Load rods from a JSON array. Each element must have:
      - id (str)
      - length (number)
    """
    rods: List[RodSpec] = []
    for idx, obj in enumerate(_load_array(path), start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            rid = str(_require(obj, "id", path))
            rods.append(RodSpec(id=rid, length=_length_of(obj, path)))
        except ValueError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return rods


def read_pieces_json(path: str) -> List[Piece]:
    """
    Load pieces from a JSON array. Each element must have:
      - id (str)
      - length (number)
    """
    pieces: List[Piece] = []
    for idx, obj in enumerate(_load_array(path), start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            pid = str(_require(obj, "id", path))
            pieces.append(Piece(id=pid, length=_length_of(obj, path)))
        except ValueError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return pieces


def read_problem(rods_path: str, pieces_path: str, sort: bool = False) -> CuttingState:
    """
    Load both files into a CuttingState.

    With sort=True, rods and pieces are ordered by ascending length (stable),
    which fixes the tie-break order independently of file order.
    """
    rods = read_rods_json(rods_path)
    pieces = read_pieces_json(pieces_path)
    if sort:
        rods = sorted(rods, key=lambda r: r.length)
        pieces = sorted(pieces, key=lambda p: p.length)
    return CuttingState(rods=tuple(rods), pieces=tuple(pieces))
