from .room_type import RoomType as RoomType
