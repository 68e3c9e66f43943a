import struct
import json
import zlib
from typing import Dict, Any, Tuple
from array import array

from maze_astar.core.errors import MazeFormatError
from maze_astar.core.maze import Maze


class MazeSerializer:
    MAGIC = b"MAZA"
    VERSION = 1

    # Flags
    FLAG_COMPRESSED = 1

    HEADER = struct.Struct("<4sBBIIIIIIH")

    @staticmethod
    def save(maze: Maze, filepath: str, meta: Dict[str, Any] = None, compress=False):
        """
        Saves the maze to a binary file.
        Format (little endian):
        - MAGIC (4 bytes)
        - VERSION (1 byte)
        - FLAGS (1 byte)
        - WIDTH, HEIGHT (4 bytes each)
        - START X, START Y, END X, END Y (4 bytes each)
        - META_LEN (2 bytes)
        - META_JSON (META_LEN bytes)
        - DATA_LEN (4 bytes)
        - DATA: packed cells, two per byte (compressed or raw)
        """
        if meta is None:
            meta = {}

        flags = 0
        if compress:
            flags |= MazeSerializer.FLAG_COMPRESSED

        meta_bytes = json.dumps(meta).encode('utf-8')

        data = maze.cells.tobytes()
        if compress:
            data = zlib.compress(data)

        with open(filepath, "wb") as f:
            f.write(MazeSerializer.HEADER.pack(
                MazeSerializer.MAGIC, MazeSerializer.VERSION, flags,
                maze.width, maze.height,
                maze.start.x, maze.start.y, maze.end.x, maze.end.y,
                len(meta_bytes)))
            f.write(meta_bytes)
            f.write(struct.pack("<I", len(data)))
            f.write(data)

    @staticmethod
    def load(filepath: str) -> Tuple[Maze, Dict[str, Any]]:
        with open(filepath, "rb") as f:
            header = f.read(MazeSerializer.HEADER.size)
            if len(header) != MazeSerializer.HEADER.size:
                raise MazeFormatError("Truncated maze header")

            (magic, version, flags, width, height,
             sx, sy, ex, ey, meta_len) = MazeSerializer.HEADER.unpack(header)
            if magic != MazeSerializer.MAGIC:
                raise MazeFormatError("Invalid file format")
            if version != MazeSerializer.VERSION:
                raise MazeFormatError(f"Unsupported maze file version {version}")

            try:
                meta = json.loads(f.read(meta_len).decode('utf-8'))
            except ValueError as e:
                raise MazeFormatError(f"Corrupt metadata: {e}") from e

            maze = Maze((width, height), (sx, sy), (ex, ey))

            raw_len = f.read(4)
            if len(raw_len) != 4:
                raise MazeFormatError("Truncated maze data")
            data_len = struct.unpack("<I", raw_len)[0]
            data = f.read(data_len)
            if len(data) != data_len:
                raise MazeFormatError(f"Truncated maze data: expected {data_len} bytes, got {len(data)}")
            if flags & MazeSerializer.FLAG_COMPRESSED:
                try:
                    data = zlib.decompress(data)
                except zlib.error as e:
                    raise MazeFormatError(f"Corrupt cell data: {e}") from e

            if len(data) != len(maze.cells):
                raise MazeFormatError(f"Expected {len(maze.cells)} bytes of cells, got {len(data)}")

            # Replace cells completely
            maze.cells = array('B', data)

            return maze, meta
