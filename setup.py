from setuptools import setup, find_packages

setup(
    name='pathtree',
    version='0.1.0',
    description='Dot-path access to nested string-keyed maps (records, JSON and YAML documents).',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'click',
        'pydantic>=2',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": [
            # 'pathtree' command will call the main() group in pathtree/cli.py
            "pathtree = pathtree.cli:main",
        ],
    },
    classifiers=[
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
)
