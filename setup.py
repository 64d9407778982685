from setuptools import setup, find_packages
setup(
    name="epoch_buckets",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "zstandard", "xxhash", "blake3", "mmh3", "siphash24", "base58"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["epoch-buckets=epoch_buckets.driver:main"]},
    python_requires=">=3.9",
)
