from setuptools import setup

setup(
    name="sybsafe",
    version="1.0.0",
    description="Error-checked wrappers around the native Sybase client functions",
    license="MIT",
    packages=["sybsafe"],
    package_dir={"": "src"},
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    zip_safe=True,
    extras_require={"test": ["pytest"]},
)
