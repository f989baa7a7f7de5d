from setuptools import setup, find_packages

setup(
    name="gridkit",
    version="0.1.0",
    packages=find_packages(include=["gridkit", "gridkit.*"]),
    package_data={"gridkit": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
