from setuptools import setup, find_packages

setup(
    name="insert-batcher",
    version="0.1.0",
    description="Parse single-row parametrized INSERT statements and merge them into multi-row INSERTs",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        'click>=8.1',
        'rich>=13.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'insert-batcher=insert_batcher.cli:main',
        ],
    },
)
