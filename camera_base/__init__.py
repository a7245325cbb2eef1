from .camera_ros_base import CameraRosBase
from .params import CameraScope

__all__ = ['CameraRosBase', 'CameraScope']
