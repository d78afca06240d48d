from pathlib import Path

from setuptools import setup

install_requires = [
        "asks>=3.0.0,<4",
        "anyio>=3.0.0",
        "h11>=0.12.0",
        "multidict>=6.0.0",
        "pytz>=2017.3",
]


setup(
    name='kaiheila',
    version='0.1.0',
    packages=['kaiheila', 'kaiheila.core', 'kaiheila.dataclasses'],
    license='LGPLv3',
    description='An async library for the KaiHeiLa HTTP API',
    long_description=Path(__file__).with_name("README.rst").read_text(encoding="utf-8"),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Framework :: AnyIO",
        "Development Status :: 4 - Beta"
    ],
    install_requires=install_requires,
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
