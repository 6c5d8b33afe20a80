NodeId = int
Edge = tuple[NodeId, NodeId]
Path = list[NodeId]
