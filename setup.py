import os

from setuptools import find_packages, setup


# Package meta data
NAME = "gamma_code"
DESCRIPTION = "Elias gamma coding of positive integers and rising sequences"
URL = "https://github.com/jambinoid/gamma-code"
AUTHOR = "Nikolay S. Lyudkevich"
EMAIL = "nikolai.lyudkevich@gmail.com"
REQUIRES_PYTHON = ">=3.7.0"

here = os.path.abspath(os.path.dirname(__file__))

try:
    with open(os.path.join(here, "requirements.txt"), encoding="utf-8") as f:
        REQUIRED = [line for line in f.read().split("\n") if line]
except FileNotFoundError:
    REQUIRED = []

about = {}
with open(os.path.join(here, "version.txt"), "r") as f:
    about["__version__"] = f.read().strip()

if __name__ == "__main__":
    setup(
        name=NAME,
        version=about["__version__"],
        description=DESCRIPTION,
        author=AUTHOR,
        author_email=EMAIL,
        python_requires=REQUIRES_PYTHON,
        url=URL,
        packages=find_packages(exclude=["test", "tools"]),
        install_requires=REQUIRED,
        extras_require={"test": ["pytest"]},
        include_package_data=True,
        license="MIT License"
    )
