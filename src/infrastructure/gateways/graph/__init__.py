"""Microsoft Graph Gateway"""
from src.infrastructure.gateways.graph.graph_gateway import GraphGateway, build_users_endpoint

__all__ = ["GraphGateway", "build_users_endpoint"]
