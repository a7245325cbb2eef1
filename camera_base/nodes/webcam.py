#!/usr/bin/env python3
"""
Webcam Camera - Captures from USB webcam.

Usage:
  ros2 run camera_base camera_node --ros-args -p source:=webcam
  ros2 run camera_base camera_node --ros-args -p source:=webcam -p device_id:=0 -p fps:=30.0
"""

import cv2

from .base import BaseCameraNode


class WebcamCameraNode(BaseCameraNode):
    """Camera node that captures from USB webcam."""

    def __init__(self, **kwargs):
        self.cap = None
        super().__init__('camera_node', **kwargs)

        self.declare_parameter('device_id', 0)
        self.declare_parameter('width', 640)
        self.declare_parameter('height', 480)

        device_id = self.get_parameter('device_id').value
        width = self.get_parameter('width').value
        height = self.get_parameter('height').value

        self.cap = cv2.VideoCapture(device_id)
        if not self.cap.isOpened():
            self.get_logger().error(f'Failed to open webcam /dev/video{device_id}')
            raise RuntimeError(f'Cannot open webcam {device_id}')

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
        self.cap.set(cv2.CAP_PROP_FPS, self.camera.fps)

        # Camera may not support what was requested
        actual_width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        actual_height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        actual_fps = self.cap.get(cv2.CAP_PROP_FPS)

        self.get_logger().info(f'Webcam opened: {actual_width}x{actual_height} @ {actual_fps} FPS')
        self.get_logger().info(
            f'Publishing to {self.camera.topic} at {self.camera.fps} Hz (source: webcam)')

    def get_frame(self):
        """Capture frame from webcam."""
        ret, frame = self.cap.read()
        if not ret:
            self.get_logger().warn('Failed to capture frame')
            return None
        return frame

    def destroy_node(self):
        """Clean up webcam on shutdown."""
        if self.cap is not None:
            self.cap.release()
        super().destroy_node()
