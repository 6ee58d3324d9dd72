from setuptools import find_packages, setup


setup(
    name="denotag",
    version="0.2.0",
    description="Build-time preprocessor that replaces <deno> tags with the output of deno run/bundle",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["denotag=denotag.cli:main"]},
)
