from setuptools import setup

setup(
        name='reachmark',
        version='1.0',
        description='Incremental, interruptible reachability marking of '
                    'directed graphs.',
        license='MIT',
        packages=[
            'reachmark',
        ],
        python_requires='>=3.8',
        install_requires=[
            "networkx",
            "numpy",
            "tqdm",
        ],
        extras_require={
            "test": [
                "pytest",
                "hypothesis",
                "pytest-benchmark",
            ],
        },
)
