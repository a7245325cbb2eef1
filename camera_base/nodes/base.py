#!/usr/bin/env python3
"""
Base Camera Node - Shared logic for all camera sources.
"""

from rclpy.node import Node
from cv_bridge import CvBridge

from ..camera_ros_base import (
    DEFAULT_MAX_DELAY, DEFAULT_MIN_DELAY, DEFAULT_WINDOW_SIZE, CameraRosBase)


class BaseCameraNode(Node):
    """Base class for camera nodes. Subclasses implement get_frame()."""

    def __init__(self, node_name: str = 'camera_node', prefix: str = '', **kwargs):
        super().__init__(node_name, **kwargs)

        self.declare_parameter('fps', 10.0)
        self.declare_parameter('hardware_id', node_name)

        fps = self.get_parameter('fps').value
        hardware_id = self.get_parameter('hardware_id').value

        self.bridge = CvBridge()
        self.camera = CameraRosBase(self, self.grab, prefix=prefix)
        self.camera.set_hardware_id(hardware_id)

        self.timer = None
        self.set_fps(fps)

    def set_fps(self, fps: float, tolerance: float = 0.1):
        """Change the publish rate and re-centre the diagnostic band on it."""
        self.camera.set_fps(fps)
        self.camera.set_topic_diagnostic_parameters(
            fps * (1.0 - tolerance), fps * (1.0 + tolerance),
            DEFAULT_WINDOW_SIZE, DEFAULT_MIN_DELAY, DEFAULT_MAX_DELAY)

        if self.timer is not None:
            self.destroy_timer(self.timer)
        self.timer = self.create_timer(1.0 / fps, self.publish_frame)

    def get_frame(self):
        """
        Get the next frame. Subclasses must implement this.
        Returns: numpy array (BGR format) or None if no frame available.
        """
        raise NotImplementedError("Subclasses must implement get_frame()")

    def grab(self, image_msg, cinfo_msg=None) -> bool:
        """Fill image_msg from get_frame(), keeping its header."""
        frame = self.get_frame()
        if frame is None:
            return False

        msg = self.bridge.cv2_to_imgmsg(frame, encoding='bgr8')
        image_msg.height = msg.height
        image_msg.width = msg.width
        image_msg.encoding = msg.encoding
        image_msg.is_bigendian = msg.is_bigendian
        image_msg.step = msg.step
        image_msg.data = msg.data
        return True

    def publish_frame(self):
        """Capture frame and publish to ROS topic."""
        self.camera.publish_camera(self.get_clock().now())
