from setuptools import setup, find_packages


setup(
    name='within_core',
    version='0.1',
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        'pydantic>=2',
    ],
    extras_require={
        'test': [
            'pytest',
            'numpy',
        ],
    },
)
