import setuptools

with open("README.md") as fh:
    long_description = fh.read()

setuptools.setup(
    name="htmx_ultralight",
    version="0.1.0",
    author="Shay Hill",
    author_email="shay_public@hotmail.com",
    description="Write htmx attributes with Python.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ShayHill/htmx_ultralight",
    package_dir={"": "src"},
    package_data={"htmx_ultralight": ["py.typed"]},
    packages=setuptools.find_packages("src"),
    install_requires=["lxml"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
