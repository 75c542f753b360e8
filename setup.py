from setuptools import setup, find_packages

setup(
    name="complex_features",
    version="0.1.0",
    packages=find_packages(include=['complex_features', 'complex_features.*']),
    install_requires=[
        'pydantic>=2.0',
        'pyyaml>=5.4.1',
        'javaproperties>=0.8',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.8',
    author="Your Name",
    author_email="your.email@example.com",
    description="Configurable functor -> complex feature library for logic-program evaluators",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/complex-features",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
