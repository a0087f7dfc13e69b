from setuptools import setup, find_packages
setup(
    name="bin2bmp",
    version="0.1.0",
    description="Losslessly convert any file into a valid 32-bit bitmap and back",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["bin2bmp=bin2bmp.cli:main"]},
    python_requires=">=3.10",
)
