from .audio import AudioClient
from .nodes import NodeDescriptor, NodeDiscoveryError, fetch_nodes, parse_nodes

__all__ = [
    "NodeDiscoveryError",
    "NodeDescriptor",
    "AudioClient",
    "fetch_nodes",
    "parse_nodes",
]
