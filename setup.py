from setuptools import setup, find_packages

setup(
    name="exactmatrix",
    version="0.1.0",
    description="Exact rational matrices with Gaussian elimination",
    long_description=("Mutable matrices of exact rational numbers supporting row and matrix arithmetic and "
                      "reduction to row echelon and reduced row echelon form"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["exactmatrix", "exactmatrix.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "rational", "gaussian elimination", "row echelon form"],
    zip_safe=False,
)
