"""Gateway implementations"""
from src.infrastructure.gateways.graph import GraphGateway
from src.infrastructure.gateways.sharepoint import SharePointGateway

__all__ = [
    "GraphGateway",
    "SharePointGateway",
]
