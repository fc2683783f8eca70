"""Cloud that performs no infrastructure calls."""
from collections import deque
from typing import Deque

from src.domain.base.ports.cloud_port import CloudPort
from src.infrastructure.logging.logger import get_logger

MAX_REMEMBERED_CIDS = 1000


class NullCloud(CloudPort):
    """Cloud backend that only logs the calls it receives, remembering the latest CIDs."""

    def __init__(self, name: str = "", max_remembered: int = MAX_REMEMBERED_CIDS):
        self.name = name
        self.deleted_vm_cids: Deque[str] = deque(maxlen=max_remembered)
        self._logger = get_logger(__name__)

    def delete_vm(self, vm_cid: str) -> None:
        self._logger.info("Null cloud delete_vm", cpi=self.name, vm_cid=vm_cid)
        self.deleted_vm_cids.append(vm_cid)
