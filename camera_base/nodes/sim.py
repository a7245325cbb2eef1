#!/usr/bin/env python3
"""
Simulated Camera - Publishes a static image.

Usage:
  ros2 run camera_base camera_node --ros-args -p source:=sim
  ros2 run camera_base camera_node --ros-args -p source:=sim -p image_path:=/path/to/image.jpg
"""

import os

import cv2
import numpy as np

from .base import BaseCameraNode


def make_test_pattern(width: int, height: int) -> np.ndarray:
    """BGR gradient with a white cross, for running without an image file."""
    x = np.linspace(0, 255, width, dtype=np.uint8)
    y = np.linspace(0, 255, height, dtype=np.uint8)
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:, :, 0] = x[np.newaxis, :]
    image[:, :, 1] = y[:, np.newaxis]
    image[:, :, 2] = 128
    image[height // 2, :] = 255
    image[:, width // 2] = 255
    return image


class SimCameraNode(BaseCameraNode):
    """Camera node that publishes a static test image."""

    def __init__(self, **kwargs):
        super().__init__('camera_node', **kwargs)

        self.declare_parameter('image_path', '')
        self.declare_parameter('width', 640)
        self.declare_parameter('height', 480)

        image_path = self.get_parameter('image_path').value
        width = self.get_parameter('width').value
        height = self.get_parameter('height').value

        if not image_path:
            self.image = make_test_pattern(width, height)
            self.get_logger().info(f'Using {width}x{height} test pattern')
        else:
            if not os.path.exists(image_path):
                self.get_logger().error(f'Image not found: {image_path}')
                raise FileNotFoundError(image_path)

            self.image = cv2.imread(image_path)
            if self.image is None:
                raise ValueError(f'Failed to load image: {image_path}')

            self.get_logger().info(f'Loaded image: {image_path} ({self.image.shape})')

        self.get_logger().info(
            f'Publishing to {self.camera.topic} at {self.camera.fps} Hz (source: sim)')

    def get_frame(self):
        """Return the static test image."""
        return self.image
