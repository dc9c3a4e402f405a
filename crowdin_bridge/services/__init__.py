"""
Service layer exports.
"""
from .crowdin_client import CrowdinClient
from .handover_service import HandoverService

__all__ = ["CrowdinClient", "HandoverService"]
