from setuptools import setup
from setuptools import find_namespace_packages

setup(
    name='image-shift',
    version='0.1.0',
    packages=find_namespace_packages(include=['imageshift', 'imageshift.*']),
    install_requires=[
        'Click',
        'boto3',
        'botocore'
    ],
    extras_require={
        'test': [
            'pytest'
        ],
    },
    entry_points={
        'console_scripts': [
            'image-shift = imageshift.imageshift:image_shift',
        ],
    },
)
