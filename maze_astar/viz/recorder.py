import logging
import os
from datetime import datetime

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)


def surface_to_frame(surface: pygame.Surface) -> np.ndarray:
    """Converts a pygame surface to an OpenCV BGR frame."""
    # array3d gives (width, height, 3) RGB, OpenCV wants (height, width, 3) BGR
    view = pygame.surfarray.array3d(surface)
    frame = np.ascontiguousarray(np.transpose(view, (1, 0, 2)))
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)


def default_output_file(prefix: str = "solve", directory: str = "recordings") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    fname = f"{prefix}_{ts}.mp4"
    if os.path.isdir(directory):
        return os.path.join(directory, fname)
    return fname


class VideoRecorder:
    """Writes every captured frame of the viewer window to an MP4 file."""

    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            self.output_file = default_output_file()

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        frame = surface_to_frame(surface)
        height, width = frame.shape[:2]

        # Writer is opened lazily, the window size is only final on first frame
        if self.writer is None:
            self.frame_size = (width, height)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info("Recording started: %s", self.output_file)
        elif (width, height) != self.frame_size:
            # VideoWriter cannot change size mid-stream
            frame = cv2.resize(frame, self.frame_size)

        self.writer.write(frame)
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info("Video saved: %s (%d frames)", self.output_file, self.frame_count)
            self.writer = None
