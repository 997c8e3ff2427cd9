from enum import Enum


class RoomType(str, Enum):
    """客室タイプ"""

    DOUBLE = "DOUBLE"
    SUITE = "SUITE"
