from setuptools import setup, find_packages

setup(
    name="ringsig_package",
    version="0.1.0",
    description="A package to verify ring signatures and linkable ring signatures over secp256k1",
    url="https://github.com/yourusername/ringsig_package",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "ecdsa>=0.18",
        "pycryptodome>=3.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
