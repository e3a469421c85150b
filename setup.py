from setuptools import find_packages, setup

setup(
  name="bjjschnorr",
  version="0.3.0",
  author="bjjschnorr developers",
  description="Schnorr signatures on BabyJubJub with Poseidon challenges, verifiable in Circom circuits",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests", "tests.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[
    "colorama>=0.4",
    "pynacl>=1.4",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
  entry_points=dict(console_scripts=["bjjschnorr = bjjschnorr.__main__:main"]),
)
