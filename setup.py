from setuptools import setup

setup(
    name='apns-envelope',
    version='0.0.1',
    install_requires=[],
    extras_require={'test': ['pytest']},
    packages=['apns_envelope'],
    python_requires='>=3.5',
    license='MIT',
    description='Binary frame encoder for the legacy Apple Push Notification Service protocol'
)
