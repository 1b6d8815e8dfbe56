"""Reads the compile-time option table exposed by the native library"""

import ctypes
from dataclasses import dataclass


class ConfigOption(ctypes.Structure):
    """Mirror of the native (name, value) option record"""
    _fields_ = [
        ("name", ctypes.c_char_p),
        ("value", ctypes.c_int),
    ]


def read_config_options(options) -> dict[str, int]:
    """Collect options up to the entry with a null name.

    `options` is anything indexable yielding ConfigOption records: a
    ctypes pointer returned by the library or a ctypes array.
    """
    values: dict[str, int] = {}
    index = 0
    while True:
        option = options[index]
        if option.name is None:
            return values
        name = option.name.decode("ascii")
        if name in values:
            raise ValueError(f"config option '{name}' reported twice")
        values[name] = option.value
        index += 1


@dataclass(frozen=True)
class NativeConfig:
    """Settings derived from the native option table"""
    values: dict[str, int]
    is_64bit: bool
    has_native_aes_support: bool
    is_big_endian_unaligned: bool
    has_int128: bool
    is_little_endian_unaligned: bool
    max_ec_size: int
    max_rsa_size: int
    max_rsa_factor: int
    use_sse2: bool

    @classmethod
    def from_values(cls, values: dict[str, int]) -> "NativeConfig":
        return cls(
            values=dict(values),
            is_64bit=values["BR_64"] == 1,
            has_native_aes_support=values["BR_AES_X86NI"] == 1,
            is_big_endian_unaligned=values["BR_BE_UNALIGNED"] == 1,
            has_int128=values["BR_INT128"] == 1,
            is_little_endian_unaligned=values["BR_LE_UNALIGNED"] == 1,
            max_ec_size=values["BR_MAX_EC_SIZE"],
            max_rsa_size=values["BR_MAX_RSA_SIZE"],
            max_rsa_factor=values["BR_MAX_RSA_FACTOR"],
            use_sse2=values["BR_SSE2"] == 1,
        )

    @classmethod
    def load(cls, library: ctypes.CDLL) -> "NativeConfig":
        get_config = library.br_get_config
        get_config.argtypes = []
        get_config.restype = ctypes.POINTER(ConfigOption)
        return cls.from_values(read_config_options(get_config()))
