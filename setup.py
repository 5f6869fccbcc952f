# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="monitorlog",
    version="0.1.0",
    description="Per-instance leveled logger with aligned columns, colour and ordered file output",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["monitorlog", "monitorlog.*"]),
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",  # just_fix_windows_console
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'monitorlog-demo=monitorlog.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
