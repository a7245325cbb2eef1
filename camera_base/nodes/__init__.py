#!/usr/bin/env python3
"""
Camera Node - Entry Point

Builds the camera driver named by the 'source' parameter. 'prefix' puts
the camera's parameters under '<prefix>.' and its topics under
'<prefix>/', e.g. '<prefix>/image_raw' and '<prefix>/camera_info'.

Usage:
  ros2 run camera_base camera_node --ros-args -p source:=sim
  ros2 run camera_base camera_node --ros-args -p source:=webcam -p prefix:=front \
      -p front.camera_name:=front -p front.calib_url:=file:///calib/front.yaml
"""

import importlib

import rclpy
from rclpy.node import Node

# source -> (module, camera node class)
SOURCES = {
    'sim': ('.sim', 'SimCameraNode'),
    'webcam': ('.webcam', 'WebcamCameraNode'),
}


def camera_node_class(source: str):
    """Resolve a source name to its BaseCameraNode subclass."""
    if source not in SOURCES:
        raise ValueError(
            f"Unknown camera source: {source}. Use one of: {', '.join(sorted(SOURCES))}.")
    module_name, class_name = SOURCES[source]
    return getattr(importlib.import_module(module_name, __name__), class_name)


def main(args=None):
    rclpy.init(args=args)

    launch_node = Node('_camera_param_reader')
    launch_node.declare_parameter('source', 'sim')
    launch_node.declare_parameter('prefix', '')
    source = launch_node.get_parameter('source').value
    prefix = launch_node.get_parameter('prefix').value
    launch_node.destroy_node()

    node = None
    try:
        node = camera_node_class(source)(prefix=prefix)
        node.get_logger().info(
            f'Camera "{node.camera.identifier or source}" publishing '
            f'{node.camera.topic} with diagnostics as "{node.camera.diagnostic_name}"')
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        if node is not None:
            node.destroy_node()
        rclpy.shutdown()


if __name__ == '__main__':
    main()
