import setuptools

setuptools.setup(
    name="chomp",
    version="0.1.0",
    license="MIT License",
    description="Minimal parser combinators over strings and token sequences",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    python_requires=">=3.7",
    install_requires=["typing_extensions"],
    extras_require={
        "test": ["pytest", "hypothesis"],
        "bench": ["pyperf"],
    },
    zip_safe=False,
)
