"""
联盟信号源

AllianceTransform 每次调用都会重新读取信号源，信号源本身不应缓存外部状态。
"""
from typing import Callable, Optional, Union
import logging

from ..core.enums import Alliance

logger = logging.getLogger(__name__)


def parse_alliance(value: Union[Alliance, str, None]) -> Optional[Alliance]:
    """
    将外部值解析为 Alliance

    接受 Alliance、'red'/'blue' (不区分大小写) 或 None；
    无法识别的值视为未知联盟 (None)。
    """
    if value is None or isinstance(value, Alliance):
        return value
    if isinstance(value, str):
        try:
            return Alliance(value.strip().lower())
        except ValueError:
            pass
    logger.debug(f"Unrecognized alliance value {value!r}, treating as unknown")
    return None


class FixedAllianceSource:
    """
    手动设置的联盟信号源

    用于测试、仿真，或由上层在收到比赛控制数据时调用 set_alliance()。
    """

    def __init__(self, alliance: Optional[Alliance] = None):
        self._alliance = parse_alliance(alliance)

    def set_alliance(self, alliance: Union[Alliance, str, None]) -> None:
        self._alliance = parse_alliance(alliance)

    def get_alliance(self) -> Optional[Alliance]:
        return self._alliance


class CallableAllianceSource:
    """
    包装无参函数的联盟信号源

    例如 CallableAllianceSource(lambda: driver_station.alliance)，
    函数返回值经 parse_alliance() 解析。
    """

    def __init__(self, func: Callable[[], Union[Alliance, str, None]]):
        if not callable(func):
            raise ValueError(f"CallableAllianceSource requires a callable, got {type(func)}")
        self._func = func

    def get_alliance(self) -> Optional[Alliance]:
        return parse_alliance(self._func())


__all__ = ['parse_alliance', 'FixedAllianceSource', 'CallableAllianceSource']
