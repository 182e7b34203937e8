from setuptools import setup

setup(
    name="balamp",
    version="0.1",
    description="A JAX reproduction of balanced amplification in a linear E/I rate model",
    author="balamp contributors",
    packages=["balamp"],
    py_modules=["reproduce"],
    python_requires=">=3.9",
    install_requires=[
        "jax",
        "numpy",
        "matplotlib",
        "absl-py",
        "termcolor",
    ],
    extras_require={"test": ["pytest"]},
)
