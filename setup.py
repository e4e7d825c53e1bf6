from setuptools import setup, find_packages

setup(
    name="siphashcd",
    version="0.1.0",
    description="Streaming, keyed SipHash-c-d (SipHash-2-4, SipHash-1-3 and any other round counts) in pure Python, with hashlib-style objects and columnar helpers.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["siphashcd=siphashcd.cli:main"],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
