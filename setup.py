from setuptools import setup, find_packages

setup(
    name='word-muse',
    version='0.1.0',
    description='Find rhymes and similar words with the Datamuse API',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click',
        'pydantic>=2',
        'pydantic-settings',
        'pyyaml',
        'requests',
        'rich',
        'rich-click',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'word-muse = word_muse.cli:app',
        ],
    },
)
