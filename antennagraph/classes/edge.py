"""
Edge representation for the antenna graph.
"""


class pyedge:
    """
    Directed, weighted link to a target vertex.

    The edge belongs to the adjacency list of its origin vertex and holds a
    non-owning reference to the target. A two-way link is stored as two
    independent edges, one in each endpoint's list.
    """

    def __init__(self, pVertex_end, dWeight: float):
        self.pVertex_end = pVertex_end
        self.dWeight = float(dWeight)

    def __repr__(self) -> str:
        return f"pyedge(to={self.pVertex_end.lVertexID}, weight={self.dWeight})"
