from setuptools import setup, find_packages

setup(
    name="miniledger",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main", "cli"],
    install_requires=[
        "pynacl==1.6.2",
        "fastapi>=0.110",
        "pydantic>=2.0",
        "uvicorn>=0.27",
    ],
    extras_require={
        "test": [
            "httpx>=0.27",
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "miniledger=cli:main",
            "miniledger-demo=main:main",
        ],
    },
    python_requires=">=3.8",
)
