"""Stand-in node and middleware so CameraRosBase runs without a ROS install."""

import logging
from dataclasses import dataclass, field

import pytest


@dataclass
class Header:
    frame_id: str = ''
    stamp: object = None


@dataclass
class Image:
    header: Header = field(default_factory=Header)
    height: int = 0
    width: int = 0
    encoding: str = ''
    is_bigendian: int = 0
    step: int = 0
    data: bytes = b''


@dataclass
class CameraInfo:
    header: Header = field(default_factory=Header)
    height: int = 0
    width: int = 0
    distortion_model: str = ''
    d: list = field(default_factory=list)
    k: list = field(default_factory=lambda: [0.0] * 9)
    r: list = field(default_factory=lambda: [0.0] * 9)
    p: list = field(default_factory=lambda: [0.0] * 12)


class FakeNode:
    def __init__(self, namespace='/', parameters=None, name='camera_node'):
        self.namespace = namespace
        self.parameters = dict(parameters or {})
        self.logger = logging.getLogger(f'test.{name}')

    def get_namespace(self):
        return self.namespace

    def get_logger(self):
        return self.logger


class FakeCameraPublisher:
    def __init__(self, events, topic, depth):
        self.events = events
        self.topic = topic
        self.depth = depth
        self.published = []
        self.subscribers = 0

    def publish(self, image_msg, cinfo_msg):
        self.published.append((image_msg, cinfo_msg))
        self.events.append('publish')

    def get_num_subscribers(self):
        return self.subscribers


class FakeCameraInfoSource:
    def __init__(self, camera_name, url):
        self.camera_name = camera_name
        self.url = url
        self.camera_info = CameraInfo(width=640, height=480, distortion_model='plumb_bob',
                                      d=[0.0] * 5,
                                      k=[500.0, 0.0, 320.0, 0.0, 500.0, 240.0, 0.0, 0.0, 1.0])

    def get_camera_info(self):
        return self.camera_info


class FakeUpdater:
    def __init__(self, events):
        self.events = events
        self.tasks = []
        self.hardware_id = None
        self.updates = 0

    def add(self, name, task):
        self.tasks.append((name, task))

    def removeByName(self, name):
        self.tasks = [(n, t) for n, t in self.tasks if n != name]

    def setHardwareID(self, hardware_id):
        self.hardware_id = hardware_id

    def update(self):
        self.updates += 1
        self.events.append('update')

    def names(self):
        return [name for name, _ in self.tasks]


class FakeTopicDiagnostic:
    def __init__(self, events, name, updater, freq_bound, window_size, min_delay, max_delay):
        self.events = events
        self.name = name
        self.freq_bound = freq_bound
        self.window_size = window_size
        self.min_delay = min_delay
        self.max_delay = max_delay
        self.ticks = []
        updater.add(f'{name} topic status', self)

    def tick(self, stamp):
        self.ticks.append(stamp)
        self.events.append('tick')


class FakeMiddleware:
    def __init__(self):
        self.events = []
        self.camera_pub = None
        self.cinfo_source = None
        self.updater = None
        self.diagnostics = []

    def get_parameter(self, node, name):
        return node.parameters.get(name)

    def advertise_camera(self, node, topic, depth):
        self.camera_pub = FakeCameraPublisher(self.events, topic, depth)
        return self.camera_pub

    def camera_info_source(self, node, camera_name, url):
        self.cinfo_source = FakeCameraInfoSource(camera_name, url)
        return self.cinfo_source

    def diagnostic_updater(self, node):
        self.updater = FakeUpdater(self.events)
        return self.updater

    def topic_diagnostic(self, name, updater, freq_bound, window_size, min_delay, max_delay):
        diagnostic = FakeTopicDiagnostic(self.events, name, updater, freq_bound,
                                         window_size, min_delay, max_delay)
        self.diagnostics.append(diagnostic)
        return diagnostic

    def new_image(self):
        return Image()


class FakeGrabber:
    """Fills a 640x480 mono8 frame; behaviour per call is scriptable."""

    def __init__(self, result=True, stamp=None, frame_id=None):
        self.result = result
        self.stamp = stamp
        self.frame_id = frame_id
        self.calls = []

    def __call__(self, image_msg, cinfo_msg=None):
        self.calls.append((image_msg, cinfo_msg))
        if not self.result:
            return False
        image_msg.width = 640
        image_msg.height = 480
        image_msg.encoding = 'mono8'
        image_msg.step = 640
        image_msg.data = bytes(640 * 480)
        if self.stamp is not None:
            image_msg.header.stamp = self.stamp
        if self.frame_id is not None:
            image_msg.header.frame_id = self.frame_id
        return True


CAMERA_PARAMETERS = {'camera_name': 'cam0', 'calib_url': 'file:///tmp/cam0.yaml'}


@pytest.fixture
def middleware():
    return FakeMiddleware()


@pytest.fixture
def grabber():
    return FakeGrabber()


@pytest.fixture
def node():
    return FakeNode('/cam0', CAMERA_PARAMETERS)
