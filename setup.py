from setuptools import setup, find_packages

setup(
    name="gridcore",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"desktop_ui": ["qml/*.qml"]},
    py_modules=["main", "layout_debug"],
    install_requires=[
        "PySide6>=6.6",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    python_requires=">=3.11",
)
