from setuptools import setup, find_packages

setup(
    name="nwsclient",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "httpx",
        "tenacity",
        "pandas",
    ],
    extras_require={
        "test": ["pytest", "respx"],
    },
    description="Client for the National Weather Service (api.weather.gov) forecast API.",
    author="chriscoveyduck",
    author_email="",
    include_package_data=True,
)
