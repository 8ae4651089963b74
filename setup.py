from setuptools import find_packages, setup

setup(
    name="lazyscalar",
    version="0.1",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    license="MIT License",
    description="Lazily evaluated scalar computations and reductions for Python",
    install_requires=[
        "attrs>=22.2.0",
        "pyrsistent>=0.19.0",
        "typing_extensions>=4.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
