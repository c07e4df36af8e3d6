from setuptools import setup, find_namespace_packages

setup(
    name="biblioteca",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'biblioteca*', 'cli*']),
    include_package_data=True,
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "fastapi",
        "pydantic>=2",
        "uvicorn",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",  # FastAPI TestClient
        ],
    },
    entry_points={
        "console_scripts": [
            "biblioteca=cli.main:main",
        ],
    },
)
