#!/usr/bin/env python3
"""
ROS 2 bindings for CameraRosBase.

Publishers, calibration and diagnostics come from rclpy, sensor_msgs,
camera_info_manager and diagnostic_updater.
"""

import diagnostic_updater
from camera_info_manager import CameraInfoError, CameraInfoManager
from rcl_interfaces.msg import ParameterDescriptor
from sensor_msgs.msg import CameraInfo, Image


def stamp_to_sec(stamp) -> float:
    """builtin_interfaces/Time -> seconds."""
    if isinstance(stamp, (int, float)):
        return float(stamp)
    return stamp.sec + stamp.nanosec * 1e-9


class CameraPublisher:
    """Publishes Image on a topic and CameraInfo on its sibling camera_info."""

    def __init__(self, node, topic: str, depth: int):
        base, _, _ = topic.rpartition('/')
        info_topic = f'{base}/camera_info' if base else 'camera_info'

        self.image_pub = node.create_publisher(Image, topic, depth)
        self.info_pub = node.create_publisher(CameraInfo, info_topic, depth)

    def publish(self, image_msg, cinfo_msg):
        self.image_pub.publish(image_msg)
        self.info_pub.publish(cinfo_msg)

    def get_num_subscribers(self) -> int:
        return max(self.image_pub.get_subscription_count(),
                   self.info_pub.get_subscription_count())


class CameraInfoSource:
    """Calibration for one camera, loaded once from a URL."""

    def __init__(self, node, camera_name: str, url: str):
        self.logger = node.get_logger()
        self.manager = CameraInfoManager(node, cname=camera_name, url=url)
        try:
            self.manager.loadCameraInfo()
        except (CameraInfoError, OSError) as e:
            self.logger.warning(f'Failed to load calibration from "{url}": {e}')

        if not self.manager.isCalibrated():
            self.logger.warning(f'Camera "{camera_name}" is not calibrated')

    def get_camera_info(self):
        try:
            return self.manager.getCameraInfo()
        except CameraInfoError:
            return CameraInfo()


class TopicDiagnostic:
    """diagnostic_updater.TopicDiagnostic fed with stamps in seconds."""

    def __init__(self, name, updater, freq_bound, window_size, min_delay, max_delay):
        self.diagnostic = diagnostic_updater.TopicDiagnostic(
            name, updater,
            diagnostic_updater.FrequencyStatusParam(freq_bound, 0.0, int(window_size)),
            diagnostic_updater.TimeStampStatusParam(min_delay, max_delay))

    def tick(self, stamp):
        self.diagnostic.tick(stamp_to_sec(stamp))


class RosMiddleware:
    """Builds the ROS side of a CameraRosBase."""

    def get_parameter(self, node, name):
        if not node.has_parameter(name):
            node.declare_parameter(name, None, ParameterDescriptor(dynamic_typing=True))
        return node.get_parameter(name).value

    def advertise_camera(self, node, topic, depth):
        return CameraPublisher(node, topic, depth)

    def camera_info_source(self, node, camera_name, url):
        return CameraInfoSource(node, camera_name, url)

    def diagnostic_updater(self, node):
        return diagnostic_updater.Updater(node)

    def topic_diagnostic(self, name, updater, freq_bound, window_size, min_delay, max_delay):
        return TopicDiagnostic(name, updater, freq_bound, window_size, min_delay, max_delay)

    def new_image(self):
        return Image()
