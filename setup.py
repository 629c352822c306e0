'''
setup script for package
'''

from setuptools import setup

PACKAGE_NAME = 'alpha_rename'

with open('README.md', "r") as fh:
    LONG_DESCRIPTION = fh.read()

setup(
    name='alpha_rename',
    version='0.1.0',
    description='Alpha-renaming pass for a small functional language',
    scripts=[],
    packages=[
        f'{PACKAGE_NAME}',
        f'{PACKAGE_NAME}.passes',
        f'{PACKAGE_NAME}.transformers',
        f'{PACKAGE_NAME}.visitors',
    ],
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown'
)
