"""Wavefront OBJ meshes: parsing, triangulation and bounding boxes.

Faces are split into triangles as a fan around their first corner, and
each triangle corner gets its own entry in the flat ``vertices``,
``normals`` and ``tex_coords`` lists. A ``usemtl`` statement starts a new
group. The first group is always the generic one, which holds the faces
that come before any ``usemtl``.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Sequence

from .materials import Material, assign_materials, load_mtl
from .vector import Vector

MAX_FACES = 65535
MAX_FACE_VERTICES = 16

TexCoord = tuple[float, float]


class ObjFormatError(ValueError):
    """Raised when OBJ text cannot be read as a mesh."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


@dataclass
class Group:
    """A run of triangle corners drawn with one material.

    ``start`` and ``end`` index the mesh's per-corner lists, so a group
    holds ``(end - start) // 3`` triangles. Whether the group uses texture
    coordinates and normals is decided by its first face.
    """

    material: Material = field(default_factory=Material)
    start: int = 0
    end: int = 0
    has_tex_coords: bool = False
    has_normals: bool = False
    _format_set: bool = field(default=False, repr=False, compare=False)

    @property
    def triangle_count(self) -> int:
        return (self.end - self.start) // 3


@dataclass
class ObjMesh:
    """A triangulated mesh read from OBJ text."""

    positions: list[Vector] = field(default_factory=list)
    vertices: list[Vector] = field(default_factory=list)
    normals: list[Vector] = field(default_factory=list)
    tex_coords: list[TexCoord] | None = None
    groups: list[Group] = field(default_factory=list)
    material_file: str | None = None
    materials: list[Material] = field(default_factory=list)
    face_count: int = 0
    tex_coord_count: int = 0
    normal_count: int = 0

    @property
    def triangle_count(self) -> int:
        return len(self.vertices) // 3

    def bounds(self) -> tuple[Vector, Vector]:
        """Smallest and largest corner of the box around all declared vertices.

        Raises ValueError when the mesh declares no vertices.
        """
        if not self.positions:
            raise ValueError("mesh has no vertices")
        xs = [p.x for p in self.positions]
        ys = [p.y for p in self.positions]
        zs = [p.z for p in self.positions]
        return Vector(min(xs), min(ys), min(zs)), Vector(max(xs), max(ys), max(zs))


def face_normals(vertices: Sequence[Vector]) -> list[Vector]:
    """Flat-shading normals: one unit normal per corner, shared by its triangle.

    A degenerate triangle gets the zero vector. Raises ValueError if the
    number of vertices is not a multiple of three.
    """
    if len(vertices) % 3:
        raise ValueError("vertex count must be a multiple of three")
    normals: list[Vector] = []
    for i in range(0, len(vertices), 3):
        normal = _triangle_normal(vertices[i], vertices[i + 1], vertices[i + 2])
        normals.extend([normal, normal.copy(), normal.copy()])
    return normals


def _triangle_normal(v0: Vector, v1: Vector, v2: Vector) -> Vector:
    a = v0 - v1
    b = v0 - v2
    c = Vector(
        a.y * b.z - b.y * a.z,
        b.x * a.z - a.x * b.z,
        a.x * b.y - b.x * a.y,
    )
    length = c.length()
    if length == 0.0 or math.isnan(length):
        return Vector()
    return Vector(c.x / length, c.y / length, c.z / length)


def _floats(tokens: Sequence[str], count: int, keyword: str, line_number: int) -> list[float]:
    if len(tokens) < count:
        raise ObjFormatError(f"'{keyword}' needs {count} numbers", line_number)
    try:
        return [float(t) for t in tokens[:count]]
    except ValueError:
        raise ObjFormatError(f"bad number in '{keyword}' statement", line_number) from None


def _index(text: str, table_size: int, what: str, line_number: int) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ObjFormatError(f"bad {what} index {text!r}", line_number) from None
    if not 1 <= value <= table_size:
        raise ObjFormatError(f"{what} index {value} out of range", line_number)
    return value - 1


@dataclass
class _Corner:
    position: int
    tex: int | None
    normal: int | None


def _parse_face(
    tokens: Sequence[str],
    line_number: int,
    n_pos: int,
    n_tex: int,
    n_norm: int,
) -> list[_Corner]:
    corners: list[_Corner] = []
    for token in tokens[:MAX_FACE_VERTICES]:
        parts = token.split("/")
        position = _index(parts[0], n_pos, "vertex", line_number)
        tex = None
        normal = None
        if len(parts) > 1 and parts[1]:
            tex = _index(parts[1], n_tex, "texture", line_number)
        if len(parts) > 2 and parts[2]:
            normal = _index(parts[2], n_norm, "normal", line_number)
        corners.append(_Corner(position, tex, normal))
    return corners


def parse_obj(text: str) -> ObjMesh:
    """Parse OBJ text into a triangulated mesh.

    Faces beyond the 65535th are ignored, and a face uses at most its
    first 16 corners. Raises ObjFormatError for malformed numbers, for
    indices that refer to nothing, and for faces with one or two corners.
    """
    mesh = ObjMesh()
    tex_table: list[TexCoord] = []
    normal_table: list[Vector] = []
    groups = [Group()]
    vertices: list[Vector] = []
    corner_normals: list[Vector | None] = []
    corner_tex: list[TexCoord] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        keyword, args = tokens[0], tokens[1:]
        if keyword == "usemtl":
            groups[-1].end = len(vertices)
            name = line.strip().partition(" ")[2].strip()
            groups.append(Group(material=Material(name=name), start=len(vertices), end=len(vertices)))
        elif keyword == "mtllib":
            mesh.material_file = line.strip().partition(" ")[2].strip()
        elif keyword == "v":
            x, y, z = _floats(args, 3, keyword, line_number)
            mesh.positions.append(Vector(x, y, z))
        elif keyword == "vt":
            u, v = _floats(args, 2, keyword, line_number)
            tex_table.append((u, v))
        elif keyword == "vn":
            x, y, z = _floats(args, 3, keyword, line_number)
            normal_table.append(Vector(x, y, z))
        elif keyword == "f":
            if mesh.face_count == MAX_FACES:
                continue
            mesh.face_count += 1
            corners = _parse_face(args, line_number, len(mesh.positions), len(tex_table), len(normal_table))
            if not corners:
                continue
            if len(corners) < 3:
                raise ObjFormatError("a face needs at least three corners", line_number)
            group = groups[-1]
            if not group._format_set:
                group.has_tex_coords = corners[0].tex is not None
                group.has_normals = corners[0].normal is not None
                group._format_set = True
            triangles = [(corners[0], corners[1], corners[2])]
            triangles += [(corners[0], corners[t], corners[t + 1]) for t in range(2, len(corners) - 1)]
            for triangle in triangles:
                for corner in triangle:
                    vertices.append(mesh.positions[corner.position].copy())
                    if group.has_tex_coords and corner.tex is not None:
                        corner_tex.append(tex_table[corner.tex])
                    else:
                        corner_tex.append((0.0, 0.0))
                    if group.has_normals and corner.normal is not None:
                        corner_normals.append(normal_table[corner.normal].copy())
                    else:
                        corner_normals.append(None)

    groups[-1].end = len(vertices)

    flat = face_normals(vertices)
    mesh.vertices = vertices
    mesh.normals = [given if given is not None else computed for given, computed in zip(corner_normals, flat)]
    mesh.tex_coords = corner_tex if tex_table else None
    mesh.groups = groups
    mesh.tex_coord_count = len(tex_table)
    mesh.normal_count = len(normal_table)
    return mesh


def load_obj(path: str | os.PathLike[str]) -> ObjMesh:
    """Read an OBJ file and give its groups their materials.

    The material library named by ``mtllib`` is looked up next to the OBJ
    file, or under ``models/`` when the path names no directory. When
    there is no library, or it cannot be read, every group gets the
    generic material. Raises OSError if the OBJ file cannot be read.
    """
    path_str = os.fspath(path)
    with open(path_str, encoding="utf-8", errors="replace") as handle:
        mesh = parse_obj(handle.read())
    materials = [Material()]
    if mesh.material_file:
        directory = os.path.dirname(path_str) or "models"
        mesh.material_file = os.path.join(directory, mesh.material_file)
        try:
            materials = load_mtl(mesh.material_file)
        except OSError:
            materials = [Material()]
    mesh.materials = materials
    assign_materials(mesh.groups, materials)
    return mesh