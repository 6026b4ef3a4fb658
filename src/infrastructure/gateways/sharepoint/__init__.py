"""SharePoint REST Gateway"""
from src.infrastructure.gateways.sharepoint.sharepoint_gateway import SharePointGateway

__all__ = ["SharePointGateway"]
