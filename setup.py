from setuptools import setup


def get_version(filename):
    import ast

    version = None
    with open(filename) as f:
        for line in f:
            if line.startswith("__version__"):
                version = ast.parse(line).body[0].value.value
                break
        else:
            raise ValueError("No version found in %r." % filename)
    if version is None:
        raise ValueError(filename)
    return version


install_requires = [
    "zuper-commons-z6>=6.0.19",
    "toolz",
    "frozendict",
]

tests_require = [
    "pytest",
    "numpy",
]

module = "orderings"
package = "orderings"
src = "src"

version = get_version(filename=f"src/{module}/__init__.py")

setup(
    name=package,
    package_dir={"": src},
    packages=[module],
    version=version,
    zip_safe=False,
    install_requires=install_requires,
    extras_require={"test": tests_require},
)
