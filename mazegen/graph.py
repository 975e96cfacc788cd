"""Voronoi graph: sites, edges, half edges and cells clipped to a bounding box."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import ClassVar

EPSILON = 1e-4


@dataclass(frozen=True, eq=False)
class Vertex:
    """A 2D point; a vertex with a NaN coordinate is undefined and falsy."""

    x: float
    y: float

    UNDEFINED: ClassVar[Vertex]

    def __bool__(self) -> bool:
        return not (math.isnan(self.x) or math.isnan(self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))


Vertex.UNDEFINED = Vertex(math.nan, math.nan)


@dataclass(eq=False)
class Site:
    """An input point together with the index of the cell built around it."""

    x: float
    y: float
    cell: int = -1

    @property
    def vertex(self) -> Vertex:
        """The site's position."""
        return Vertex(self.x, self.y)

    @classmethod
    def of(cls, item: Site | Vertex | tuple[float, float]) -> Site:
        """Make a fresh site from a site, a vertex or an (x, y) pair."""
        if isinstance(item, (Site, Vertex)):
            return cls(float(item.x), float(item.y))
        x, y = item
        return cls(float(x), float(y))


@dataclass
class Edge:
    """A Voronoi edge separating two sites; its end points start undefined."""

    left_site: int = -1
    right_site: int = -1
    p0: Vertex = Vertex.UNDEFINED
    p1: Vertex = Vertex.UNDEFINED

    def set_startpoint(self, left_site: int, right_site: int, vertex: Vertex) -> None:
        """Record the point where the edge starts, seen from left_site."""
        if not self.p0 and not self.p1:
            self.p0 = vertex
            self.left_site = left_site
            self.right_site = right_site
        elif self.left_site == right_site:
            self.p1 = vertex
        else:
            self.p0 = vertex

    def set_endpoint(self, left_site: int, right_site: int, vertex: Vertex) -> None:
        """Record the point where the edge ends, seen from left_site."""
        self.set_startpoint(right_site, left_site, vertex)


@dataclass
class HalfEdge:
    """An edge as seen from one of its sites."""

    site: int
    edge: int
    angle: float


@dataclass
class Cell:
    """The region around a site, bounded by half edges."""

    site: int
    half_edges: list[HalfEdge] = field(default_factory=list)
    close_me: bool = False


class Graph:
    """Sites, edges and cells of a Voronoi diagram inside [0, x_bound] x [0, y_bound]."""

    def __init__(
        self,
        x_bound: float,
        y_bound: float,
        sites: Iterable[Site | Vertex | tuple[float, float]] = (),
    ) -> None:
        self.x_bound = float(x_bound)
        self.y_bound = float(y_bound)
        self.sites: list[Site] = [Site.of(site) for site in sites]
        self.edges: list[Edge] = []
        self.cells: list[Cell] = []

    def create_edge(
        self,
        left: int,
        right: int,
        va: Vertex = Vertex.UNDEFINED,
        vb: Vertex = Vertex.UNDEFINED,
    ) -> int:
        """Add an edge between two sites and a half edge to each of their cells."""
        edge = Edge(left, right)
        self.edges.append(edge)
        index = len(self.edges) - 1
        if va:
            edge.set_startpoint(left, right, va)
        if vb:
            edge.set_endpoint(left, right, vb)
        self.cells[self.sites[left].cell].half_edges.append(
            self.create_half_edge(index, left, right)
        )
        self.cells[self.sites[right].cell].half_edges.append(
            self.create_half_edge(index, right, left)
        )
        return index

    def create_border_edge(self, site: int, va: Vertex, vb: Vertex) -> int:
        """Add an edge lying on the bounding box, owned by a single site."""
        self.edges.append(Edge(site, -1, va, vb))
        return len(self.edges) - 1

    def create_half_edge(self, edge: int, left_site: int, right_site: int) -> HalfEdge:
        """Make the half edge of an edge as seen from left_site."""
        left = self.sites[left_site]
        if right_site >= 0:
            right = self.sites[right_site]
            angle = math.atan2(right.y - left.y, right.x - left.x)
        else:
            ref = self.edges[edge]
            if ref.left_site == left_site:
                angle = math.atan2(ref.p1.x - ref.p0.x, ref.p0.y - ref.p1.y)
            else:
                angle = math.atan2(ref.p0.x - ref.p1.x, ref.p1.y - ref.p0.y)
        return HalfEdge(site=left_site, edge=edge, angle=angle)

    def connect_edge(self, index: int) -> bool:
        """Extend a dangling edge to the bounding box; False if it misses the box."""
        edge = self.edges[index]
        if edge.p1:
            return True

        xl, xr, yt, yb = 0.0, self.x_bound, 0.0, self.y_bound
        left = self.sites[edge.left_site]
        right = self.sites[edge.right_site]
        lx, ly, rx, ry = left.x, left.y, right.x, right.y
        fx, fy = (lx + rx) / 2, (ly + ry) / 2

        self.cells[left.cell].close_me = True
        self.cells[right.cell].close_me = True

        p0 = edge.p0
        if ry == ly:
            if fx < xl or fx >= xr:
                return False
            if lx > rx:
                if not p0 or p0.x < yt:
                    p0 = Vertex(fx, yt)
                elif p0.y >= yb:
                    return False
                p1 = Vertex(fx, yb)
            else:
                if not p0 or p0.y > yb:
                    p0 = Vertex(fx, yb)
                elif p0.y < yt:
                    return False
                p1 = Vertex(fx, yt)
        else:
            fm = (lx - rx) / (ry - ly)
            fb = fy - fm * fx
            if fm < -1.0 or fm > 1.0:
                if lx > rx:
                    if not p0 or p0.y < yt:
                        p0 = Vertex((yt - fb) / fm, yt)
                    elif p0.y >= yb:
                        return False
                    p1 = Vertex((yb - fb) / fm, yb)
                else:
                    if not p0 or p0.y > yb:
                        p0 = Vertex((yb - fb) / fm, yb)
                    elif p0.y < yt:
                        return False
                    p1 = Vertex((yt - fb) / fm, yt)
            elif ly < ry:
                if not p0 or p0.x < xl:
                    p0 = Vertex(xl, fm * xl + fb)
                elif p0.x >= xr:
                    return False
                p1 = Vertex(xr, fm * xr + fb)
            else:
                if not p0 or p0.x > xr:
                    p0 = Vertex(xr, fm * xr + fb)
                elif p0.x < xl:
                    return False
                p1 = Vertex(xl, fm * xl + fb)

        edge.p0 = p0
        edge.p1 = p1
        return True

    def clip_edge(self, index: int) -> bool:
        """Clip an edge to the bounding box (Liang-Barsky); False if wholly outside."""
        edge = self.edges[index]
        ax, ay = edge.p0.x, edge.p0.y
        bx, by = edge.p1.x, edge.p1.y
        dx, dy = bx - ax, by - ay
        t0, t1 = 0.0, 1.0

        # Each boundary as (q, d): the segment is inside where q + t*d >= 0.
        for q, d in ((ax, dx), (self.x_bound - ax, -dx), (ay, dy), (self.y_bound - ay, -dy)):
            if d == 0.0:
                if q < 0:
                    return False
                continue
            r = -q / d
            if d < 0.0:
                if r < t0:
                    return False
                t1 = min(t1, r)
            else:
                if r > t1:
                    return False
                t0 = max(t0, r)

        if t0 > 0.0:
            edge.p0 = _snap(Vertex(ax + t0 * dx, ay + t0 * dy))
        if t1 < 1.0:
            edge.p1 = _snap(Vertex(ax + t1 * dx, ay + t1 * dy))
        if t0 > 0.0 or t1 < 1.0:
            self.cells[self.sites[edge.left_site].cell].close_me = True
            self.cells[self.sites[edge.right_site].cell].close_me = True
        return True

    def clip_edges(self) -> None:
        """Connect dangling edges to the box, clip them, and blank unusable ones."""
        for index, edge in enumerate(self.edges):
            if (
                not self.connect_edge(index)
                or not self.clip_edge(index)
                or (abs(edge.p0.x - edge.p1.x) < EPSILON and abs(edge.p0.y - edge.p1.y) < EPSILON)
            ):
                edge.p0 = Vertex.UNDEFINED
                edge.p1 = Vertex.UNDEFINED

    def half_edge_start(self, half_edge: HalfEdge) -> Vertex:
        """Where the half edge starts, going round its site."""
        edge = self.edges[half_edge.edge]
        return edge.p0 if edge.left_site == half_edge.site else edge.p1

    def half_edge_end(self, half_edge: HalfEdge) -> Vertex:
        """Where the half edge ends, going round its site."""
        edge = self.edges[half_edge.edge]
        return edge.p1 if edge.left_site == half_edge.site else edge.p0

    def prepare_half_edges(self, cell: int) -> bool:
        """Drop half edges of blanked edges and sort the rest by descending angle."""
        if cell >= len(self.cells):
            return False
        target = self.cells[cell]
        kept = [
            half
            for half in target.half_edges
            if self.edges[half.edge].p0 and self.edges[half.edge].p1
        ]
        kept.sort(key=lambda half: half.angle, reverse=True)
        target.half_edges = kept
        return bool(kept)

    def close_cells(self) -> None:
        """Add border edges so that every open cell becomes a closed polygon."""
        for index in reversed(range(len(self.cells))):
            cell = self.cells[index]
            if not self.prepare_half_edges(index) or not cell.close_me:
                continue
            half_edges = cell.half_edges
            i_left = 0
            while i_left < len(half_edges):
                va = self.half_edge_end(half_edges[i_left])
                vz = self.half_edge_start(half_edges[(i_left + 1) % len(half_edges)])
                if abs(va.x - vz.x) >= EPSILON or abs(va.y - vz.y) >= EPSILON:
                    i_left = self._close_gap(cell, i_left, va, vz)
                i_left += 1
            cell.close_me = False

    def _close_gap(self, cell: Cell, i_left: int, va: Vertex, vz: Vertex) -> int:
        """Walk the box border from va to vz, inserting border half edges after i_left."""
        xl, xr, yt, yb = 0.0, self.x_bound, 0.0, self.y_bound

        # Each side of the box, walked counterclockwise: whether va runs along it,
        # whether vz lies on it, and the corner (or vz) reached at its end.
        sides: list[
            tuple[Callable[[Vertex], bool], Callable[[], bool], Callable[[bool], Vertex]]
        ] = [
            (
                lambda v: abs(v.x - xl) < EPSILON and (yb - v.y) > EPSILON,
                lambda: abs(vz.x - xl) < EPSILON,
                lambda last: Vertex(xl, vz.y if last else yb),
            ),
            (
                lambda v: abs(v.y - yb) < EPSILON and (xr - v.x) > EPSILON,
                lambda: abs(vz.y - yb) < EPSILON,
                lambda last: Vertex(vz.x if last else xr, yb),
            ),
            (
                lambda v: abs(v.x - xr) < EPSILON and (v.y - yt) > EPSILON,
                lambda: abs(vz.x - xr) < EPSILON,
                lambda last: Vertex(xr, vz.y if last else yt),
            ),
            (
                lambda v: abs(v.y - yt) < EPSILON and (v.x - xl) > EPSILON,
                lambda: abs(vz.y - yt) < EPSILON,
                lambda last: Vertex(vz.x if last else xl, yt),
            ),
        ]

        done = False
        walk = [(side, True) for side in sides] + [(side, False) for side in sides[:3]]
        for (on_side, reaches_end, corner), needs_side in walk:
            if done or (needs_side and not on_side(va)):
                continue
            done = reaches_end()
            vb = corner(done)
            edge = self.create_border_edge(cell.site, va, vb)
            i_left += 1
            cell.half_edges.insert(i_left, self.create_half_edge(edge, cell.site, -1))
            va = vb
        return i_left


def _snap(vertex: Vertex) -> Vertex:
    """Flush coordinates that are within epsilon of the low bounds to zero."""
    return Vertex(
        0.0 if vertex.x < EPSILON else vertex.x,
        0.0 if vertex.y < EPSILON else vertex.y,
    )