from setuptools import find_packages, setup  # type: ignore
from version import __version__

setup(
    name="lamb",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"lamb": ["py.typed"]},
    extras_require={
        "test": ["pytest<9.1", "pytest-asyncio"],
        "typing": ["typing_extensions"],
        "docs": ["sphinx", "sphinx-autodoc-typehints", "myst-parser", "furo"],
    },
    license="Apache 2.",
    description="Hold and invoke callables of any arity, letting their exceptions through untouched",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
