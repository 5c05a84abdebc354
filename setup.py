from setuptools import setup, find_packages

setup(
    name='qtile-sprechuhr',
    version='0.1.0',
    packages=find_packages(exclude=["test*"]),
    include_package_data=True,
    install_requires=["qtile", "cairocffi"],
    extras_require={"test": ["pytest<9"]},
    description='A German speaking clock ("fünf vor halb drei") for qtile.',
    author='elParaguayo',
    license='MIT',
)
