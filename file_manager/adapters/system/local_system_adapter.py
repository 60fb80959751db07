"""
Host information adapter backed by the standard library.
"""

import getpass
import logging
import os
import platform
import sys
from typing import Any, Optional

from typing_extensions import override

from file_manager.entities.os_info import OsInfo
from file_manager.ports.system.system_info_port import SystemInfoPort


class LocalSystemInfoAdapter(SystemInfoPort):
    """Reads architecture, memory and user details of the machine we run on.

    Each probe degrades to a neutral value instead of failing, so os-info
    always prints something.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def get_os_info(self) -> OsInfo:
        total, free = self._get_memory_info()
        return OsInfo(
            architecture=platform.machine() or "unknown",
            total_memory=total,
            free_memory=free,
            user_info=self._get_user_info(),
        )

    def _get_memory_info(self) -> tuple[int, int]:
        """Return (total, free) physical memory in bytes, zeros when unknown."""
        if hasattr(os, "sysconf"):
            try:
                page = int(os.sysconf("SC_PAGE_SIZE"))
                phys = int(os.sysconf("SC_PHYS_PAGES"))
                avail = (
                    int(os.sysconf("SC_AVPHYS_PAGES"))
                    if "SC_AVPHYS_PAGES" in os.sysconf_names
                    else 0
                )
                return max(page * phys, 0), max(page * avail, 0)
            except (ValueError, OSError) as e:
                self._logger.debug(f"sysconf memory probe failed: {e}")
        if sys.platform.startswith("win"):
            try:
                import ctypes

                class MEMORYSTATUSEX(ctypes.Structure):
                    _fields_ = [
                        ("dwLength", ctypes.c_ulong),
                        ("dwMemoryLoad", ctypes.c_ulong),
                        ("ullTotalPhys", ctypes.c_ulonglong),
                        ("ullAvailPhys", ctypes.c_ulonglong),
                        ("ullTotalPageFile", ctypes.c_ulonglong),
                        ("ullAvailPageFile", ctypes.c_ulonglong),
                        ("ullTotalVirtual", ctypes.c_ulonglong),
                        ("ullAvailVirtual", ctypes.c_ulonglong),
                        ("sullAvailExtendedVirtual", ctypes.c_ulonglong),
                    ]

                stat = MEMORYSTATUSEX()
                stat.dwLength = ctypes.sizeof(MEMORYSTATUSEX)
                if ctypes.windll.kernel32.GlobalMemoryStatusEx(ctypes.byref(stat)):  # type: ignore[attr-defined]
                    return int(stat.ullTotalPhys), int(stat.ullAvailPhys)
            except (AttributeError, OSError) as e:
                self._logger.debug(f"GlobalMemoryStatusEx probe failed: {e}")
        return 0, 0

    def _get_user_info(self) -> dict[str, Any]:
        """Describe the current user: uid, gid, username, homedir, shell."""
        info: dict[str, Any] = {
            "uid": -1,
            "gid": -1,
            "username": "",
            "homedir": os.path.expanduser("~"),
            "shell": None,
        }
        try:
            import pwd

            entry = pwd.getpwuid(os.getuid())
            info.update(
                uid=entry.pw_uid,
                gid=entry.pw_gid,
                username=entry.pw_name,
                homedir=entry.pw_dir,
                shell=entry.pw_shell,
            )
            return info
        except (ImportError, KeyError, AttributeError) as e:
            self._logger.debug(f"pwd lookup unavailable: {e}")
        try:
            info["username"] = getpass.getuser()
        except (OSError, KeyError, ImportError) as e:
            self._logger.debug(f"getpass.getuser failed: {e}")
        return info
