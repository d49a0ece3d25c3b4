"""
contentgraph
============

A directed, labeled content graph registry.

Participants register content-addressed nodes, link them with
labeled directional edges, and toggle nodes and links on and off.
Only a node's creator or the system owner may mutate it.

Public API:
- GraphStore
- RegistryConfig
- EventBus
"""

from contentgraph.graph.graph_store import GraphStore
from contentgraph.config.settings import RegistryConfig
from contentgraph.events.event_bus import EventBus

__all__ = [
    "GraphStore",
    "RegistryConfig",
    "EventBus",
]

__version__ = "0.1.0"
