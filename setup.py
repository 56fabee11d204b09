from setuptools import setup, find_packages

setup(
    name="relay_schema",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.109.2",
        "uvicorn>=0.27.1",
        "strawberry-graphql>=0.219.0",
        "graphql-core>=3.2.3",
        "python-dotenv>=1.0.1",
        "pydantic>=2.6.1",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "httpx>=0.27.0",
        ],
    },
)
