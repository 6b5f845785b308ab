from setuptools import setup, find_namespace_packages

setup(
    name="media_catalog",
    version="0.1.0",
    packages=find_namespace_packages(include=['cli*', 'catalog*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "pydantic>=2",
        "alembic",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "media-catalog=cli.main:main",
        ],
    },
)
