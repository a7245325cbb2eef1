#!/usr/bin/env python3
"""
Camera-scoped parameter lookup.

A camera scope is the view of one camera's parameters under a node.
With prefix 'left' on node '/robot/stereo', parameters are read as
'left.<key>' and topics live under '/robot/left'.
"""


class CameraScope:
    """Namespaced parameter and topic view for one camera."""

    def __init__(self, node, prefix: str = '', lookup=None):
        self.node = node
        self.prefix = prefix.strip('/')
        # lookup(node, name) -> value, or None when the parameter is unset
        self._lookup = lookup

    @property
    def namespace(self) -> str:
        """Node namespace joined with the prefix; '' at root."""
        namespace = self.node.get_namespace().rstrip('/')
        if self.prefix:
            namespace = f'{namespace}/{self.prefix}'
        return namespace

    def resolve(self, name: str) -> str:
        if not self.prefix:
            return name
        return f"{self.prefix.replace('/', '.')}.{name}"

    def topic(self, name: str) -> str:
        """Topic name relative to the node namespace."""
        if not self.prefix:
            return name
        return f'{self.prefix}/{name}'

    def lookup(self, name: str):
        return self._lookup(self.node, self.resolve(name))

    def get_param(self, name: str, type_=str):
        """
        Read a required parameter.

        A missing parameter is logged as an error and a default-constructed
        value of type_ is returned so callers can carry on.
        """
        value = self.lookup(name)
        if value is None:
            self.node.get_logger().error(f'Cannot find parameter: {self.resolve(name)}')
            return type_()
        return value

    def param(self, name: str, default):
        """Read an optional parameter, falling back to default."""
        value = self.lookup(name)
        if value is None:
            return default
        return value
