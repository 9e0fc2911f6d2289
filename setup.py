import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="proto_codegen_plugin",
    version="1.0.1",
    description="protoc plugin injecting generated Java code into protobuf messages selected by traits and patterns",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Intended Audience :: Developers",
    ],
    keywords="protobuf protoc plugin code generation java insertion point template",
    url="https://github.com/madlag/proto_codegen_plugin",
    author="François Lagunas",
    author_email="francois.lagunas@gmail.com",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
        "protobuf>=4.24.0",
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
            "protoc-gen-codegen=proto_codegen_plugin.proto_codegen_plugin:proto_codegen_plugin",
        ],
    },
    include_package_data=True,
    package_data={
        "proto_codegen_plugin": ["templates/**/*.jinja2"],
    },
    zip_safe=False,
)
