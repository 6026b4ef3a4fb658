"""Application Ports (Interfaces)"""
from .gateways import IGraphGateway, ISharePointGateway, ITokenProvider

__all__ = [
    "IGraphGateway",
    "ISharePointGateway",
    "ITokenProvider",
]
