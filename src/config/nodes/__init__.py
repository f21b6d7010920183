"""Descritores declarativos dos nodes (metadados de UI do host)."""

from config.nodes.loader import (
    CREDENTIAL_KIND,
    NODE_KIND,
    NodeDescriptorError,
    clear_descriptor_cache,
    list_node_descriptors,
    load_node_descriptor,
)

__all__ = [
    "CREDENTIAL_KIND",
    "NODE_KIND",
    "NodeDescriptorError",
    "clear_descriptor_cache",
    "list_node_descriptors",
    "load_node_descriptor",
]
