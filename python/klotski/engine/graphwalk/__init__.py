from klotski.engine.graphwalk.walker import (
    GraphSummary,
    find_node,
    iter_edges,
    iter_nodes,
    summarize,
)

__all__ = ["GraphSummary", "find_node", "iter_edges", "iter_nodes", "summarize"]
