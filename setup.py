from setuptools import setup, find_packages


requirements = []
with open("requirements.txt") as f:
    for line in f:
        line = line.strip()
        if line:
            requirements.append(line)

setup(
    name='polyscan',
    version='0.1.0',
    packages=find_packages(exclude=["tests"]),
    description='Polyscan: find homopolymer-rich windows in DNA sequences and report them as BED',
    author='Maximillian Marin',
    author_email='maximilliangmarin@gmail.com',
    python_requires='>=3.10',
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "polyscan=polyscan.main:main",
        ],
    },
)
