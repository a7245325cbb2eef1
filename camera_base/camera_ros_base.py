#!/usr/bin/env python3
"""
Camera ROS Base - Publishes camera frames with calibration and diagnostics.

A driver hands CameraRosBase a grab callable and calls publish_camera()
once per frame. Each successful grab is published as an
(Image, CameraInfo) pair on image_raw and ticked into a topic diagnostic
that the diagnostic updater reports on.

Usage:
  camera = CameraRosBase(node, self.grab, prefix='left')
  camera.set_hardware_id('usb-1234')
  camera.publish_camera(node.get_clock().now())
"""

import copy

from .params import CameraScope

DEFAULT_FPS = 10.0
DEFAULT_WINDOW_SIZE = 10.0
DEFAULT_MIN_DELAY = -0.01
DEFAULT_MAX_DELAY = 0.1


class CameraRosBase:
    """
    Publish cycle for one camera.

    grab(image_msg, cinfo_msg=None) -> bool fills the image from the
    device and may adjust the calibration. It is called with a
    pre-stamped image; returning False drops the frame.
    """

    def __init__(self, node, grab, prefix: str = '', middleware=None):
        if middleware is None:
            from .ros import RosMiddleware
            middleware = RosMiddleware()

        self.node = node
        self.middleware = middleware
        self._grab = grab
        self.scope = CameraScope(node, prefix, middleware.get_parameter)

        self.topic = self.scope.topic('image_raw')
        self.camera_pub = middleware.advertise_camera(node, self.topic, 1)

        camera_name = self.scope.get_param('camera_name')
        calib_url = self.scope.get_param('calib_url')
        self.cinfo_source = middleware.camera_info_source(node, camera_name, calib_url)

        self._fps = DEFAULT_FPS
        # Shared with every topic diagnostic built from it; mutate in place
        self._freq_bound = {'min': 0.0, 'max': 0.0}
        self.diagnostic_updater = middleware.diagnostic_updater(node)
        self.topic_diagnostic = None
        self.set_topic_diagnostic_parameters(
            self._fps * 0.9, self._fps * 1.1,
            DEFAULT_WINDOW_SIZE, DEFAULT_MIN_DELAY, DEFAULT_MAX_DELAY)

        self._frame_id = self.scope.param('frame_id', self.scope.namespace)
        self._identifier = self.scope.param('identifier', '')
        if not self._frame_id:
            node.get_logger().warning(
                f'Empty frame_id for {self.topic}; set {self.scope.resolve("frame_id")}')

    def __copy__(self):
        raise TypeError(f'{type(self).__name__} cannot be copied')

    def __deepcopy__(self, memo):
        raise TypeError(f'{type(self).__name__} cannot be copied')

    def __reduce_ex__(self, protocol):
        raise TypeError(f'{type(self).__name__} cannot be pickled')

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def frame_id(self) -> str:
        return self._frame_id

    @property
    def fps(self) -> float:
        return self._fps

    def set_fps(self, fps: float):
        """Set the nominal rate. The diagnostic band is left as it is."""
        self._fps = fps

    @property
    def min_fps(self) -> float:
        return self._freq_bound['min']

    @property
    def max_fps(self) -> float:
        return self._freq_bound['max']

    @property
    def diagnostic_topic(self) -> str:
        namespace = self.scope.namespace
        return f'{namespace}/image_raw' if namespace else 'image_raw'

    @property
    def diagnostic_name(self) -> str:
        """Name the topic diagnostic is registered under."""
        return f'{self.diagnostic_topic} topic status'

    def set_topic_diagnostic_parameters(self, min_freq: float, max_freq: float,
                                        window_size: float,
                                        min_delay: float, max_delay: float):
        """
        Set limits for topic diagnostics and rebuild the diagnostic.

        Args:
            min_freq: min allowed frequency [Hz]
            max_freq: max allowed frequency [Hz]
            window_size: frequency averaging window
            min_delay: min allowed delay of timestamp [s], negative is early
            max_delay: max allowed delay of timestamp [s]
        """
        self._freq_bound['min'] = min_freq
        self._freq_bound['max'] = max_freq

        # The old task has to go before a new one takes the same name
        self.diagnostic_updater.removeByName(self.diagnostic_name)
        self.topic_diagnostic = self.middleware.topic_diagnostic(
            self.diagnostic_topic, self.diagnostic_updater, self._freq_bound,
            window_size, min_delay, max_delay)

    def set_hardware_id(self, hardware_id: str):
        self.diagnostic_updater.setHardwareID(hardware_id)

    def publish_camera(self, time):
        """
        Grab a frame and publish it with its camera info.

        Args:
            time: acquisition time stamp
        """
        image_msg = self.middleware.new_image()
        cinfo_msg = copy.deepcopy(self.cinfo_source.get_camera_info())
        image_msg.header.frame_id = self._frame_id
        image_msg.header.stamp = time.to_msg() if hasattr(time, 'to_msg') else time

        if self._grab(image_msg, cinfo_msg):
            cinfo_msg.header = copy.deepcopy(image_msg.header)
            self.camera_pub.publish(image_msg, cinfo_msg)
            self.topic_diagnostic.tick(image_msg.header.stamp)

        self.diagnostic_updater.update()

    def publish(self, image_msg):
        """Publish an image the caller has already filled in."""
        cinfo_msg = copy.deepcopy(self.cinfo_source.get_camera_info())
        image_msg.header.frame_id = self._frame_id
        cinfo_msg.header = copy.deepcopy(image_msg.header)
        self.camera_pub.publish(image_msg, cinfo_msg)
        self.topic_diagnostic.tick(image_msg.header.stamp)
        self.diagnostic_updater.update()

    def get_num_subscribers(self) -> int:
        return self.camera_pub.get_num_subscribers()
