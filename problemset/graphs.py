"""Shortest-path problems on graphs whose edges are subdivided into chains of nodes."""

import heapq


def reachable_nodes(edges, max_moves, n):
    """Count the nodes reachable from node 0 within max_moves moves.

    Each edge ``(u, v, cnt)`` is subdivided into ``cnt`` new nodes, so going
    from ``u`` to ``v`` along it takes ``cnt + 1`` moves.  Both original and
    subdivision nodes are counted.
    """
    if n < 1:
        raise ValueError("the graph must have at least one node")
    if max_moves < 0:
        raise ValueError("max_moves must not be negative")

    adjacency = [[] for _ in range(n)]
    for u, v, count in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) refers to a node outside 0..{n - 1}")
        if count < 0:
            raise ValueError("subdivision counts must not be negative")
        adjacency[u].append((v, count + 1))
        adjacency[v].append((u, count + 1))

    infinity = float("inf")
    distance = [infinity] * n
    distance[0] = 0
    heap = [(0, 0)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))

    reached = sum(dist <= max_moves for dist in distance)
    for u, v, count in edges:
        from_u = max(max_moves - distance[u], 0)
        from_v = max(max_moves - distance[v], 0)
        reached += min(from_u + from_v, count)
    return int(reached)