from setuptools import setup
from eptolite.const import VERSION_STR, DESCRIPTION

setup(
    name="eptolite",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    author="jenmol",
    author_email="jenmol@users.noreply.github.com",
    packages=["eptolite"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "eptolite = eptolite:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
