import struct
from typing import Iterator, Tuple

# Event Types
EVT_EXPAND = 0x01      # node moved from frontier to explored
EVT_FRONTIER = 0x02    # child node pushed onto the frontier
EVT_PATH_ADD = 0x03    # cell on the final path
EVT_RESULT = 0x04      # search finished, payload is solved flag + path length

MAGIC = b"ASTRLOG"

# Coordinates are unsigned shorts
MAX_COORD = 0xFFFF

# Payload layout per event type (after the type byte)
_PAYLOADS = {
    EVT_EXPAND: struct.Struct(">HH"),
    EVT_FRONTIER: struct.Struct(">HH"),
    EVT_PATH_ADD: struct.Struct(">HH"),
    EVT_RESULT: struct.Struct(">BI"),
}


class EventWriter:
    """
    Binary log of a search, for replay and explored-set visualisation.
    Header: MAGIC + width (4b) + height (4b), then one record per event.
    Coordinates are packed as unsigned shorts, so mazes up to 65536 cells a side.
    """
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "wb")
        self.count = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def write_header(self, width: int, height: int):
        if not (0 < width <= MAX_COORD + 1 and 0 < height <= MAX_COORD + 1):
            raise ValueError(f"Event log cannot record a {width}x{height} maze, "
                             f"coordinates are limited to {MAX_COORD}")
        self.file.write(MAGIC)
        self.file.write(struct.pack(">II", width, height))

    def _write(self, type_code: int, *values):
        self.file.write(bytes((type_code,)) + _PAYLOADS[type_code].pack(*values))
        self.count += 1

    def log_expand(self, x: int, y: int):
        self._write(EVT_EXPAND, x, y)

    def log_frontier(self, x: int, y: int):
        self._write(EVT_FRONTIER, x, y)

    def log_path_add(self, x: int, y: int):
        self._write(EVT_PATH_ADD, x, y)

    def log_result(self, solved: bool, path_length: int):
        self._write(EVT_RESULT, 1 if solved else 0, path_length)

    def close(self):
        if self.file:
            self.file.close()
            self.file = None


class EventReader:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "rb")
        self.width = 0
        self.height = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def read_header(self) -> Tuple[int, int]:
        magic = self.file.read(len(MAGIC))
        if magic != MAGIC:
            raise ValueError("Invalid event log file")
        data = self.file.read(8)
        self.width, self.height = struct.unpack(">II", data)
        return self.width, self.height

    def stream_events(self) -> Iterator[Tuple[int, Tuple]]:
        while True:
            type_byte = self.file.read(1)
            if not type_byte:
                break

            type_code = type_byte[0]
            payload = _PAYLOADS.get(type_code)
            if payload is None:
                raise ValueError(f"Unknown event type 0x{type_code:02x}")

            data = self.file.read(payload.size)
            if len(data) != payload.size:
                raise ValueError("Truncated event log")
            yield (type_code, payload.unpack(data))

    def close(self):
        if self.file:
            self.file.close()
            self.file = None
