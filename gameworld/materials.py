"""Wavefront MTL material libraries and their assignment to mesh groups."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Iterable, Protocol, Sequence

RGBA = tuple[float, float, float, float]

GENERIC_NAME = "generic"
DEFAULT_DIFFUSE: RGBA = (0.8, 0.8, 0.8, 1.0)
DEFAULT_SPECULAR: RGBA = (0.0, 0.0, 0.0, 1.0)
DEFAULT_AMBIENT: RGBA = (0.2, 0.2, 0.2, 1.0)


@dataclass
class Material:
    """Surface properties of a mesh group: colours and an optional texture."""

    name: str = GENERIC_NAME
    diffuse: RGBA = DEFAULT_DIFFUSE
    specular: RGBA = DEFAULT_SPECULAR
    ambient: RGBA = DEFAULT_AMBIENT
    texture_filename: str | None = None


class _HasMaterial(Protocol):
    material: Material


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _parse_colour(tokens: Sequence[str]) -> RGBA | None:
    """Read three clamped colour components after the keyword token."""
    if len(tokens) < 4:
        return None
    try:
        r, g, b = (float(t) for t in tokens[1:4])
    except ValueError:
        return None
    return (_clamp(r), _clamp(g), _clamp(b), 1.0)


def parse_mtl(text: str) -> list[Material]:
    """Parse the text of an MTL file.

    The returned list always starts with the generic default material,
    followed by one material per ``newmtl`` statement in file order.
    Colour statements before the first ``newmtl`` modify the generic one.
    Colour components are clamped to 0..1.
    """
    materials = [Material()]
    for line in text.splitlines():
        tokens = line.split()
        current = materials[-1]
        if "newmtl" in line:
            name = tokens[1] if len(tokens) > 1 else ""
            materials.append(Material(name=name))
        elif "map_Kd" in line:
            if len(tokens) > 1:
                current.texture_filename = tokens[1]
        elif "Kd" in line:
            colour = _parse_colour(tokens)
            if colour is not None:
                current.diffuse = colour
        elif "Ks" in line:
            colour = _parse_colour(tokens)
            if colour is not None:
                current.specular = colour
        elif "Ka" in line:
            colour = _parse_colour(tokens)
            if colour is not None:
                current.ambient = colour
    return materials


def load_mtl(path: str | os.PathLike[str]) -> list[Material]:
    """Read and parse an MTL file.

    Texture file names are resolved against the directory holding the
    MTL file, or against ``models/`` when the path names no directory.
    Raises OSError (such as FileNotFoundError) if the file cannot be read.
    """
    path_str = os.fspath(path)
    with open(path_str, encoding="utf-8", errors="replace") as handle:
        materials = parse_mtl(handle.read())
    directory = os.path.dirname(path_str) or "models"
    for material in materials:
        if material.texture_filename is not None:
            material.texture_filename = os.path.join(directory, material.texture_filename)
    return materials


def assign_materials(groups: Iterable[_HasMaterial], materials: Sequence[Material]) -> None:
    """Give each group a copy of the material whose name matches its own.

    A group whose material name matches none gets the first (generic)
    material. When several materials share a name, the last one wins.
    Raises ValueError if ``materials`` is empty.
    """
    if not materials:
        raise ValueError("at least one material is required")
    for group in groups:
        wanted = group.material.name
        chosen = materials[0]
        for material in materials:
            if material.name == wanted:
                chosen = material
        group.material = replace(chosen)