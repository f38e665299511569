from setuptools import setup, find_packages

setup(
    name="matrixsolver",
    version="1.0",
    description="Row reduction and arithmetic on named single-precision matrices",
    long_description=("Interactive-calculator core for small linear algebra tasks: elementary row operations, "
                      "reduction to reduced row echelon form, transpose, addition, multiplication and duplication "
                      "of named matrices"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.9",
    packages=find_packages(include=["matrixsolver", "matrixsolver.*"]),
    install_requires=["numpy", "scipy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Education", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "gaussian elimination", "row echelon form", "matrix"],
    zip_safe=False,
)
