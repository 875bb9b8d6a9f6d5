from setuptools import find_namespace_packages, setup


setup(
    name="argv-utils",
    version="1.0.0",
    description="Minimal --name / --name=value command-line argument parser.",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["argv_utils", "argv_utils.*"]),
    python_requires=">=3.8",
    install_requires=[
        "termcolor>=2.1.0"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    }
)
