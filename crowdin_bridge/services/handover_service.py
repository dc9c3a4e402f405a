"""
Hands collected Crowdin data over to the Pycord Support service.
"""
import json
import logging
from typing import Optional

import requests

from crowdin_bridge.models import CrowdinUser
from crowdin_bridge.services.crowdin_client import is_success

logger = logging.getLogger(__name__)


class HandoverService:
    AUTH_SCHEME = "AITSYS"

    def __init__(self, handover_uri: str, api_key: str, timeout: Optional[float] = None):
        self.handover_uri = handover_uri
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "HandoverService":
        return cls(
            handover_uri=config['HANDOVER_URI'],
            api_key=config['PYCORD_SUPPORT_API_KEY'],
            timeout=config.get('HTTP_TIMEOUT'),
        )

    def build_payload(self, user: CrowdinUser, translation_count: int) -> dict:
        return {
            'crowdin_user': user.to_dict(),
            'crowdin_translation_count': translation_count,
        }

    def hand_over(self, user: CrowdinUser, translation_count: int) -> bool:
        """
        POST the user and their translation count downstream.

        Returns:
            True if the handover endpoint answered 2xx, False otherwise
        """
        response = requests.post(
            self.handover_uri,
            data=json.dumps(self.build_payload(user, translation_count), separators=(',', ':')),
            headers={
                'Content-Type': 'application/json',
                'Authorization': f"{self.AUTH_SCHEME} {self.api_key}",
            },
            timeout=self.timeout,
        )
        if not is_success(response):
            logger.error(f"Handover for Crowdin user {user.id} failed with HTTP {response.status_code}")
            return False

        logger.info(f"Handed over Crowdin user {user.id}")
        return True
