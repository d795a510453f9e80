"""
Bookkeeping of the instances registered by this process
"""

import threading
from typing import Dict, List


class SelfInstanceCache:
    """
    Service ID -> instance IDs registered by this process.

    Entries never expire; an instance ID is recorded at most once per service.
    """

    def __init__(self):
        self._instances: Dict[str, List[str]] = {}
        self.lock = threading.RLock()

    def get(self, service_id: str) -> List[str]:
        """Instance IDs for a service, empty if none"""
        with self.lock:
            return list(self._instances.get(service_id, []))

    def add(self, service_id: str, instance_id: str) -> bool:
        """
        Record an instance ID under a service

        Args:
            service_id: Owning service
            instance_id: Instance registered by this process

        Returns:
            True if the ID was appended, False if it was already recorded
        """
        with self.lock:
            instance_ids = self._instances.setdefault(service_id, [])
            if instance_id in instance_ids:
                return False
            instance_ids.append(instance_id)
            return True

    def items(self) -> Dict[str, List[str]]:
        with self.lock:
            return {sid: list(ids) for sid, ids in self._instances.items()}

    def __contains__(self, service_id: str) -> bool:
        with self.lock:
            return service_id in self._instances

    def __len__(self) -> int:
        with self.lock:
            return len(self._instances)
