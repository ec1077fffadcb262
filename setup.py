from setuptools import setup, find_packages

setup(
    name='linejoin',
    version='0.0.1',
    author='linejoin developers',
    description='In-memory relations with semi-join reduction and chained evaluation of line joins',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["tests", "tests.*"]),
    license='Apache License 2.0',
    install_requires=[

        'pandas',
        'numpy',
        'PyYAML',
        'networkx',
        'tqdm',

    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
