from setuptools import setup, find_packages


def read_requirements():
    with open("requirements.txt") as req:
        content = req.read()
        requirements = [r.strip() for r in content.split("\n") if r.strip()]

    return requirements


setup(
    name='cupidconf',
    version='0.1.0',
    packages=find_packages(exclude=('tests', 'tests.*')),
    package_data={
        'cupidconf': ['templates/*.jinja']
    },
    install_requires=read_requirements(),
    extras_require={
        'test': ['pytest>=7.0', 'pytest-mock>=3.0']
    },
    entry_points={
        'console_scripts': [
            'cupidconf=cupidconf.cli:cli'
        ]
    }
)
