import json
import logging
from typing import Optional

from file_manager.entities.operation_result import OperationResult
from file_manager.ports.system.system_info_port import SystemInfoPort


class GetOsInfoUseCase:
    """Use case that renders the host description printed by os-info."""

    def __init__(
        self,
        system_info: SystemInfoPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._system_info = system_info
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> OperationResult:
        info = self._system_info.get_os_info()
        self._logger.info(f"Read host info (arch={info.architecture})")
        lines = [
            "Operating System Info:",
            f"Architecture: {info.architecture}",
            f"Total Memory: {info.total_memory_mb:.2f} MB",
            f"Free Memory: {info.free_memory_mb:.2f} MB",
            f"User Info: {json.dumps(info.user_info, ensure_ascii=False)}",
        ]
        return OperationResult.success("\n".join(lines), payload=info)
