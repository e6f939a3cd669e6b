import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="kerrsolve",
    version="0.1.0",
    author="KerrSolve authors",
    description="Polynomial root solvers, root sorting and bisection used "
                "in black hole ray tracing and accretion disk models.",
    include_package_data=True,
    install_requires=[
        'numpy', 'scipy'
    ],
    extras_require={
        'test': ['pytest'],
        'examples': ['matplotlib'],
    },
    keywords='astrophysics black hole accretion disk quartic roots',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['kerrsolve', 'kerrsolve.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Astronomy",
        "Topic :: Scientific/Engineering :: Physics"
    ]
)
