from setuptools import find_packages, setup

package_name = 'camera_base'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages', ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
    ],
    install_requires=['setuptools', 'numpy', 'opencv-python'],
    zip_safe=True,
    maintainer='Jin Wei Lim',
    maintainer_email='jin@example.com',
    description='Base for ROS2 camera drivers: image + camera info publishing with topic diagnostics',
    license='MIT',
    tests_require=['pytest'],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'camera_node = camera_base.nodes:main',
        ],
    },
)
