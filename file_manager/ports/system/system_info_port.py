from abc import ABC, abstractmethod

from file_manager.entities.os_info import OsInfo


class SystemInfoPort(ABC):
    @abstractmethod
    def get_os_info(self) -> OsInfo:
        """Read architecture, memory totals and the current user from the host."""
        pass
