from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="EachTools",
    version=version,
    description="Searching, filtering, grouping and windowing operations "
                "for anything that can be traversed with a callback",
    long_description=long_description,
    author="Nicolas Granger",
    author_email="nicolas.granger.m@gmail.com",
    keywords=['enumerable', 'traversal', 'sequence', 'iteration', 'processing'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(include=['eachtools', 'eachtools.*']),
    python_requires='>=3.8',
    install_requires=[
        'tblib>=2.0'],
    extras_require={
        'tests': [
            'pytest', 'pytest-timeout', 'numpy', 'coverage']
    }
)
