from setuptools import setup, find_packages

setup(
    name="ehr-log-analyzer",
    version="0.1.0",
    description="Extract players, RPC events, chat and EAC reports from Endless Host Roles HTML logs",
    author="Your Name",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"ehr_log_analyzer": ["config/*.yaml"]},
    include_package_data=True,
    install_requires=[
        "click>=8.1.0",
        "pyyaml>=6.0",
        "pandas>=2.0.0",
        "rich>=13.0.0",
        "beautifulsoup4>=4.12.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ehr-log-analyzer=ehr_log_analyzer.cli.main:main",
        ],
    },
    python_requires=">=3.8",
)
