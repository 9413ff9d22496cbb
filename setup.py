import codecs
import os
import re

from packaging.requirements import Requirement
from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))


def parse_requirements(path):
    with open(os.path.join(here, path)) as requirements_file:
        lines = (line.split("#", 1)[0].strip() for line in requirements_file)
        return [str(Requirement(line)) for line in lines if line]


# loading version from setup.py
with codecs.open(os.path.join(here, "punyidna/__init__.py"), encoding="utf-8") as init_file:
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", init_file.read(), re.M)
    version_string = version_match.group(1)

install_requires = parse_requirements("requirements.txt")

extras = {}

extras["dev"] = parse_requirements("requirements-dev.txt")

setup(
    name="punyidna",
    version=version_string,
    description="Punycode (RFC 3492) and IDNA2008 label conversion",
    long_description="Converts internationalized domain names between the Unicode form and the ASCII-compatible "
    "encoding: a Bootstring/Punycode codec with checked arithmetic and the IDNA2008 label framing on top of it.",
    packages=find_packages(exclude=["tests"]),
    license="MIT",
    python_requires=">=3.7",
    install_requires=install_requires,
    extras_require=extras,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing",
    ],
    keywords="idna, idna2008, punycode, bootstring, rfc3492, rfc5890, domain names, unicode",
)
