from setuptools import find_packages, setup

setup(
    name="matchings",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["numpy", "scipy"],
    entry_points={"console_scripts": ["matchings=matchings.main:main"]},
    zip_safe=False,
)
