import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="borsh_schema_to_graph",
    version="0.1.0",
    description="Normalize Borsh schema containers and describe values as debug traces or RDF statements",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
        "Topic :: Text Processing",
        "Intended Audience :: Developers",
    ],
    keywords="borsh schema reflection rdf ntriples graph serialization",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "borsh_schema_to_graph=borsh_schema_to_graph.borsh_schema_to_graph:borsh_schema_to_graph",
        ],
    },
    include_package_data=True,
    package_data={
        "borsh_schema_to_graph": ["templates/*.jinja2"],
    },
    zip_safe=False,
)
