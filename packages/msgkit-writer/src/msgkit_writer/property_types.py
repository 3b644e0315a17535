"""MAPI property value types (MS-OXCDATA section 2.11.1).

The enum value of each member is the 16-bit type code written to disk in
property stream names; it must never change for a given member.
"""

from __future__ import annotations

from enum import IntEnum

from msgkit_writer.errors import InvalidArgumentException

MV_FLAG = 0x1000


class PropertyType(IntEnum):
    """Wire-level property value types."""

    PT_UNSPECIFIED = 0x0000
    PT_NULL = 0x0001
    PT_SHORT = 0x0002  # 16-bit signed integer
    PT_LONG = 0x0003  # 32-bit signed integer
    PT_FLOAT = 0x0004  # 4-byte floating point
    PT_DOUBLE = 0x0005  # 8-byte floating point
    PT_CURRENCY = 0x0006  # 8-byte signed integer (scaled by 10000)
    PT_APPTIME = 0x0007  # 8-byte floating point (application time)
    PT_ERROR = 0x000A  # 32-bit error value
    PT_BOOLEAN = 0x000B  # 16-bit boolean (0 or 1)
    PT_OBJECT = 0x000D  # embedded object
    PT_I8 = 0x0014  # 64-bit signed integer
    PT_STRING8 = 0x001E  # 8-bit codepage string
    PT_UNICODE = 0x001F  # UTF-16-LE string
    PT_SYSTIME = 0x0040  # FILETIME
    PT_CLSID = 0x0048  # GUID
    PT_SVREID = 0x00FB  # server entry id
    PT_SRESTRICT = 0x00FD  # restriction
    PT_ACTIONS = 0x00FE  # rule actions
    PT_BINARY = 0x0102

    PT_MV_SHORT = 0x1002
    PT_MV_LONG = 0x1003
    PT_MV_FLOAT = 0x1004
    PT_MV_DOUBLE = 0x1005
    PT_MV_CURRENCY = 0x1006
    PT_MV_APPTIME = 0x1007
    PT_MV_I8 = 0x1014
    PT_MV_STRING8 = 0x101E
    PT_MV_UNICODE = 0x101F
    PT_MV_SYSTIME = 0x1040
    PT_MV_CLSID = 0x1048
    PT_MV_BINARY = 0x1102

    @classmethod
    def from_code(cls, code: int) -> PropertyType:
        """Return the member for a 16-bit type *code*.

        Raises
        ------
        InvalidArgumentException
            If *code* is not one of the published type codes.
        """
        try:
            return cls(code)
        except ValueError:
            raise InvalidArgumentException(
                f"Unknown property type code 0x{code:04X}", stage="types"
            ) from None

    @property
    def is_multi_valued(self) -> bool:
        return bool(self.value & MV_FLAG)

    @property
    def base_type(self) -> PropertyType:
        """The single-valued type of a multi-valued member (or the member itself)."""
        return PropertyType(self.value & ~MV_FLAG)

    @property
    def is_string(self) -> bool:
        return self.base_type in (PropertyType.PT_STRING8, PropertyType.PT_UNICODE)

    @property
    def fixed_size(self) -> int | None:
        """Byte width of one value, or ``None`` for variable-length types."""
        return _FIXED_SIZES.get(self.base_type)


_FIXED_SIZES: dict[PropertyType, int] = {
    PropertyType.PT_SHORT: 2,
    PropertyType.PT_LONG: 4,
    PropertyType.PT_FLOAT: 4,
    PropertyType.PT_DOUBLE: 8,
    PropertyType.PT_CURRENCY: 8,
    PropertyType.PT_APPTIME: 8,
    PropertyType.PT_ERROR: 4,
    PropertyType.PT_BOOLEAN: 2,
    PropertyType.PT_I8: 8,
    PropertyType.PT_SYSTIME: 8,
    PropertyType.PT_CLSID: 16,
}
