from glob import glob
from setuptools import setup


setup(
    name='elo',
    use_scm_version={
        'fallback_version': '1.0.0',
    },
    description='Elo Physics/Math RPN Language',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['elo'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    tests_require=[
        'pytest',
        'pytest-cov',
        'coverage',
        'flake8',
        'bandit',
        'mypy',
        'safety',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
            'bandit',
            'mypy',
            'safety',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
