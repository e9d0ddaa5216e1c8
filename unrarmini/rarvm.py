"""Standard filters of the RAR 3.x virtual machine."""

import enum
import zlib
from dataclasses import dataclass, field
from functools import reduce
from operator import xor

from .rawint import MASK32, raw_get4, raw_put4

VM_MEMSIZE = 0x40000
VM_MEMMASK = VM_MEMSIZE - 1
MAX_CHANNELS = 1024

_E8_MAX_SIZE = 0x1000000
_ITANIUM_MASKS = (4, 4, 6, 6, 0, 0, 7, 7, 4, 4, 0, 0, 4, 4, 0, 0)


class FilterType(enum.IntEnum):
    """Standard filters recognised from the VM code."""

    NONE = 0
    E8 = 1
    E8E9 = 2
    ITANIUM = 3
    RGB = 4
    AUDIO = 5
    DELTA = 6


# (code length, code CRC32, filter)
_STANDARD_FILTERS = (
    (53, 0xAD576887, FilterType.E8),
    (57, 0x3CD7E57E, FilterType.E8E9),
    (120, 0x3769893F, FilterType.ITANIUM),
    (29, 0x0E06077D, FilterType.DELTA),
    (149, 0x1C2C5DC8, FilterType.RGB),
    (216, 0xBC85E701, FilterType.AUDIO),
)


@dataclass
class PreparedProgram:
    """A filter ready to run, with its initial registers and its output."""

    type: FilterType = FilterType.NONE
    init_r: list = field(default_factory=lambda: [0] * 7)
    filtered_data: bytes | None = None
    filtered_data_size: int = 0


def _signed_char(value):
    value &= 0xFF
    return value - 256 if value >= 128 else value


def delta_filter(mem, data_size, channels):
    """Undo the delta filter: decode ``data_size`` bytes at the start of
    ``mem`` into ``mem[data_size:2 * data_size]``."""
    border = data_size * 2
    src = 0
    for channel in range(channels):
        prev = 0
        for dest in range(data_size + channel, border, channels):
            prev = (prev - mem[src]) & 0xFF
            mem[dest] = prev
            src += 1


def rgb_filter(mem, data_size, width, channels=3):
    """Undo the RGB predictor: decode ``data_size`` bytes at the start of
    ``mem`` into ``mem[data_size:2 * data_size]``."""
    base = data_size
    src = 0
    for channel in range(channels):
        prev = 0
        for i in range(channel, data_size, channels):
            if i >= width:
                upper = mem[base + i - width]
                upper_left = mem[base + i - width + channels]
            else:
                upper = upper_left = 0
            predicted = prev + upper - upper_left
            pa = abs(predicted - prev)
            pb = abs(predicted - upper)
            pc = abs(predicted - upper_left)
            if pa <= pb and pa <= pc:
                predicted = prev
            elif pb <= pc:
                predicted = upper
            else:
                predicted = upper_left
            value = (predicted - mem[src]) & 0xFF
            src += 1
            mem[base + i] = value
            prev = value


def _audio_filter(mem, data_size, channels):
    dest = data_size
    src = 0
    for channel in range(channels):
        last_delta = last_char = 0
        p1 = p2 = p3 = p4 = 0
        k1 = k2 = k3 = k4 = k5 = 0
        for i in range(channel, data_size, channels):
            predicted = 8 * p1 + k1 * p1 + k2 * p2 + k3 * p3 + k4 * p4 + k5 * last_delta
            predicted = ((predicted & MASK32) >> 3) & 0xFF
            cur = mem[src]
            src += 1
            predicted -= cur
            mem[dest + i] = predicted & 0xFF
            prev_delta = _signed_char(predicted - last_char)
            p4, p3, p2, p1 = p3, p2, p1, predicted
            d = _signed_char(cur)
            if d != 0:
                sign = 1 if d > 0 else -1
                k1 += 1 if sign * _signed_char(p1) >= 0 else -1
                k2 += 1 if sign * _signed_char(p2) >= 0 else -1
                k3 += 1 if sign * _signed_char(p3) >= 0 else -1
                k4 += 1 if sign * _signed_char(p4) >= 0 else -1
                k5 += 1 if sign * _signed_char(last_delta) >= 0 else -1
            last_char = predicted
            last_delta = prev_delta


class RarVM:
    """Runs the standard filters over its working memory."""

    def __init__(self):
        self.memory = bytearray(VM_MEMSIZE + 4)
        self._r = [0] * 8

    def prepare(self, code):
        """Recognise a standard filter from its VM code.

        Code with a bad XOR checksum or of an unknown filter gives a program
        of type NONE.
        """
        code = bytes(code)
        if not code:
            raise ValueError("empty VM code")
        program = PreparedProgram()
        if reduce(xor, code[1:], 0) != code[0]:
            return program
        crc = zlib.crc32(code)
        for length, filter_crc, filter_type in _STANDARD_FILTERS:
            if filter_crc == crc and length == len(code):
                program.type = filter_type
                break
        return program

    def execute(self, program):
        """Run ``program``; store and return the filtered bytes.

        Nothing is run for a program of type NONE, and None is returned.
        """
        if len(program.init_r) != 7:
            raise ValueError("init_r must hold 7 registers")
        self._r[:7] = [v & MASK32 for v in program.init_r]
        program.filtered_data = None
        if program.type == FilterType.NONE:
            return None
        success = self._execute_standard_filter(FilterType(program.type))
        block_size = program.init_r[4] & VM_MEMMASK
        program.filtered_data_size = block_size
        offset = 0
        if program.type in (FilterType.DELTA, FilterType.RGB, FilterType.AUDIO):
            if 2 * block_size <= VM_MEMSIZE and success:
                offset = block_size
        program.filtered_data = bytes(self.memory[offset:offset + block_size])
        return program.filtered_data

    def set_memory(self, pos, data):
        """Copy ``data`` to ``pos``; what does not fit in memory is dropped."""
        if pos < 0:
            raise ValueError("negative memory position")
        if pos < VM_MEMSIZE:
            size = min(len(data), VM_MEMSIZE - pos)
            if size:
                self.memory[pos:pos + size] = bytes(data[:size])

    def _execute_standard_filter(self, filter_type):
        mem = self.memory
        r = self._r
        if filter_type in (FilterType.E8, FilterType.E8E9):
            data_size, file_offset = r[4], r[6]
            if data_size >= VM_MEMSIZE or data_size < 4:
                return True
            cur = 0
            while cur <= data_size - 5:
                byte = mem[cur]
                cur += 1
                if byte == 0xE8 or (byte == 0xE9 and filter_type == FilterType.E8E9):
                    addr = raw_get4(mem, cur)
                    if addr < _E8_MAX_SIZE:
                        raw_put4(addr - file_offset, mem, cur)
                    elif addr & _E8_MAX_SIZE:
                        raw_put4(addr + _E8_MAX_SIZE, mem, cur)
                    cur += 4
            return True
        if filter_type == FilterType.ITANIUM:
            data_size, file_offset = r[4], r[6]
            if data_size >= VM_MEMSIZE or data_size < 21:
                return True
            cur = 0
            file_offset >>= 4
            while cur <= data_size - 21:
                byte = mem[cur] & 0x1F
                if byte in (0x11, 0x12, 0x13, 0x16, 0x17):
                    mask = _ITANIUM_MASKS[byte - 0x10]
                    for i in range(3):
                        if (mask >> i) & 1:
                            start = cur + i * 5 + 5
                            addr = int.from_bytes(mem[start:start + 3], "little")
                            addr = (addr - file_offset) & 0xFFFFFF
                            mem[start:start + 3] = addr.to_bytes(3, "little")
                cur += 16
                file_offset = (file_offset + 1) & MASK32
            return True
        if filter_type == FilterType.DELTA:
            data_size, channels = r[4], r[0]
            if data_size > VM_MEMSIZE // 2 or channels > MAX_CHANNELS or channels == 0:
                return False
            delta_filter(mem, data_size, channels)
            return True
        if filter_type == FilterType.RGB:
            data_size, width, channels = r[4], r[0], 3
            if data_size > VM_MEMSIZE // 2 or data_size < channels or width <= channels:
                return True
            rgb_filter(mem, data_size, width, channels)
            return True
        if filter_type == FilterType.AUDIO:
            data_size, channels = r[4], r[0]
            if data_size > VM_MEMSIZE // 2 or channels > MAX_CHANNELS or channels == 0:
                return True
            _audio_filter(mem, data_size, channels)
            return True
        return False