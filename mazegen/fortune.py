"""Fortune's sweep-line algorithm building a Voronoi graph from a set of sites."""

from __future__ import annotations

import math
from collections.abc import Iterable

from mazegen.graph import EPSILON, Cell, Graph, Site, Vertex
from mazegen.rbtree import RBNode, RBTree


class BeachArc(RBNode):
    """A parabolic section of the beach line belonging to one site."""

    def __init__(self, site: int) -> None:
        super().__init__()
        self.site = site
        self.edge = -1
        self.circle_event: CircleEvent | None = None


class CircleEvent(RBNode):
    """The point where a beach arc is squeezed out between its neighbours."""

    def __init__(self, arc: BeachArc) -> None:
        super().__init__()
        self.arc = arc
        self.site = arc.site
        self.x = 0.0
        self.y = 0.0
        self.y_center = 0.0


class Fortune:
    """The beach line and pending circle events of a sweep over a graph's sites."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self.beachline = RBTree()
        self.circle_events = RBTree()
        self._top_circle_event: CircleEvent | None = None

    @property
    def circle_event(self) -> CircleEvent | None:
        """The earliest pending circle event, if any."""
        return self._top_circle_event

    @property
    def _sites(self) -> list[Site]:
        return self.graph.sites

    def _left_break_point(self, arc: BeachArc, directrix: float) -> float:
        site = self._sites[arc.site]
        rfocx, rfocy = site.x, site.y
        pby2 = rfocy - directrix
        # degenerate parabola: the focus lies on the directrix
        if pby2 == 0.0:
            return rfocx
        left_arc = arc.previous
        if left_arc is None:
            return -math.inf
        left = self._sites[left_arc.site]
        lfocx, lfocy = left.x, left.y
        plby2 = lfocy - directrix
        if plby2 == 0.0:
            return lfocx
        hl = lfocx - rfocx
        aby2 = 1 / pby2 - 1 / plby2
        b = hl / plby2
        if aby2 != 0.0:
            disc = b * b - 2 * aby2 * (
                hl * hl / (-2 * plby2) - lfocy + plby2 / 2 + rfocy - pby2 / 2
            )
            dist = math.sqrt(disc) if disc >= 0 else math.nan
            return (-b + dist) / aby2 + rfocx
        # both parabolas are equally far from the directrix
        return (rfocx + lfocx) / 2

    def _right_break_point(self, arc: BeachArc, directrix: float) -> float:
        if arc.next is not None:
            return self._left_break_point(arc.next, directrix)
        site = self._sites[arc.site]
        return site.x if site.y == directrix else math.inf

    def _attach_circle_event(self, arc: BeachArc) -> None:
        left_arc, right_arc = arc.previous, arc.next
        if left_arc is None or right_arc is None:
            return
        if left_arc.site == right_arc.site:
            return

        left = self._sites[left_arc.site]
        center = self._sites[arc.site]
        right = self._sites[right_arc.site]

        bx, by = center.x, center.y
        ax, ay = left.x - bx, left.y - by
        cx, cy = right.x - bx, right.y - by

        # clockwise triplets never converge
        d = 2 * (ax * cy - ay * cx)
        if d >= -2e-9:
            return

        ha = ax * ax + ay * ay
        hc = cx * cx + cy * cy
        x = (cy * ha - ay * hc) / d
        y = (ax * hc - cx * ha) / d
        y_center = y + by

        event = CircleEvent(arc)
        event.x = x + bx
        event.y = y_center + math.sqrt(x * x + y * y)
        event.y_center = y_center
        arc.circle_event = event

        predecessor: CircleEvent | None = None
        node = self.circle_events.root
        while node is not None:
            if event.y < node.y or (event.y == node.y and event.x <= node.x):
                if node.left is not None:
                    node = node.left
                else:
                    predecessor = node.previous
                    break
            elif node.right is not None:
                node = node.right
            else:
                predecessor = node
                break
        self.circle_events.insert(predecessor, event)
        if predecessor is None:
            self._top_circle_event = event

    def _detach_circle_event(self, arc: BeachArc) -> None:
        event = arc.circle_event
        if event is None:
            return
        if event.previous is None:
            self._top_circle_event = event.next
        self.circle_events.remove(event)
        arc.circle_event = None

    def _detach_beach_section(self, arc: BeachArc) -> None:
        self._detach_circle_event(arc)
        self.beachline.remove(arc)

    def add_beach_section(self, site: int) -> None:
        """Insert the arc of a newly swept site into the beach line."""
        new_site = self._sites[site]
        x, directrix = new_site.x, new_site.y

        left_arc: BeachArc | None = None
        right_arc: BeachArc | None = None
        node = self.beachline.root
        while node is not None:
            dxl = self._left_break_point(node, directrix) - x
            if dxl > EPSILON:
                node = node.left
                continue
            dxr = x - self._right_break_point(node, directrix)
            if dxr > EPSILON:
                if node.right is None:
                    left_arc = node
                    break
                node = node.right
                continue
            if dxl > -EPSILON:
                left_arc, right_arc = node.previous, node
            elif dxr > -EPSILON:
                left_arc, right_arc = node, node.next
            else:
                left_arc = right_arc = node
            break

        new_arc = BeachArc(site)
        self.beachline.insert(left_arc, new_arc)

        if left_arc is None and right_arc is None:
            return

        if left_arc is right_arc:
            # the new arc splits an existing one in two
            self._detach_circle_event(left_arc)
            right_arc = BeachArc(left_arc.site)
            self.beachline.insert(new_arc, right_arc)
            edge = self.graph.create_edge(left_arc.site, new_arc.site)
            new_arc.edge = right_arc.edge = edge
            self._attach_circle_event(left_arc)
            self._attach_circle_event(right_arc)
            return

        if left_arc is not None and right_arc is None:
            # the new arc is the right-most one on the beach line
            new_arc.edge = self.graph.create_edge(left_arc.site, new_arc.site)
            return

        # the new arc falls exactly between two existing arcs
        self._detach_circle_event(left_arc)
        self._detach_circle_event(right_arc)

        left = self._sites[left_arc.site]
        right = self._sites[right_arc.site]
        ax, ay = left.x, left.y
        bx, by = new_site.x - ax, new_site.y - ay
        cx, cy = right.x - ax, right.y - ay
        d = 2 * (bx * cy - by * cx)
        hb = bx * bx + by * by
        hc = cx * cx + cy * cy
        vertex = Vertex(ax + (cy * hb - by * hc) / d, ay + (bx * hc - cx * hb) / d)

        self.graph.edges[right_arc.edge].set_startpoint(left_arc.site, right_arc.site, vertex)
        new_arc.edge = self.graph.create_edge(left_arc.site, site, Vertex.UNDEFINED, vertex)
        right_arc.edge = self.graph.create_edge(site, right_arc.site, Vertex.UNDEFINED, vertex)

        self._attach_circle_event(left_arc)
        self._attach_circle_event(right_arc)

    def remove_beach_section(self, arc: BeachArc) -> None:
        """Collapse an arc at its circle event, creating a Voronoi vertex."""
        circle = arc.circle_event
        if circle is None:
            raise ValueError("the arc has no pending circle event")
        x, y = circle.x, circle.y_center
        vertex = Vertex(x, y)

        previous, following = arc.previous, arc.next
        detached: list[BeachArc] = [arc]
        self._detach_beach_section(arc)

        def collapses_here(candidate: BeachArc) -> bool:
            event = candidate.circle_event
            return (
                event is not None
                and abs(x - event.x) < EPSILON
                and abs(y - event.y_center) < EPSILON
            )

        left_arc = previous
        while collapses_here(left_arc):
            previous = left_arc.previous
            detached.insert(0, left_arc)
            self._detach_beach_section(left_arc)
            left_arc = previous
        detached.insert(0, left_arc)
        self._detach_circle_event(left_arc)

        right_arc = following
        while collapses_here(right_arc):
            following = right_arc.next
            detached.append(right_arc)
            self._detach_beach_section(right_arc)
            right_arc = following
        detached.append(right_arc)
        self._detach_circle_event(right_arc)

        for left, right in zip(detached, detached[1:]):
            self.graph.edges[right.edge].set_startpoint(left.site, right.site, vertex)

        left_arc, right_arc = detached[0], detached[-1]
        right_arc.edge = self.graph.create_edge(
            left_arc.site, right_arc.site, Vertex.UNDEFINED, vertex
        )
        self._attach_circle_event(left_arc)
        self._attach_circle_event(right_arc)


def build(
    sites: Iterable[Site | Vertex | tuple[float, float]],
    x_bound: float,
    y_bound: float,
) -> Graph:
    """Build the Voronoi graph of the sites, clipped to [0, x_bound] x [0, y_bound]."""
    graph = Graph(x_bound, y_bound, sites)
    all_sites = graph.sites

    # drop sites equal to the one just before them
    events: list[int] = []
    last: Site | None = None
    for index, site in enumerate(all_sites):
        if last is None or (last.x, last.y) != (site.x, site.y):
            events.append(index)
        last = site
    events.sort(key=lambda index: (all_sites[index].y, all_sites[index].x))

    fortune = Fortune(graph)
    pending = iter(events)
    site_index = next(pending, None)
    while True:
        circle = fortune.circle_event
        site = all_sites[site_index] if site_index is not None else None
        if site is not None and (
            circle is None
            or site.y < circle.y
            or (site.y == circle.y and site.x < circle.x)
        ):
            graph.cells.append(Cell(site_index))
            site.cell = len(graph.cells) - 1
            fortune.add_beach_section(site_index)
            site_index = next(pending, None)
        elif circle is not None:
            fortune.remove_beach_section(circle.arc)
        else:
            break

    graph.clip_edges()
    graph.close_cells()
    return graph