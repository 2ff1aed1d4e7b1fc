import jsontypes
from setuptools import setup

setup(
    name='jsontypes',
    description='Infer field types across a JSON array of objects.',
    version=jsontypes.__version__,
    url='N/A',
    author='ycyuxin',
    author_email='ycyuxin(at)qq.com',
    packages=['jsontypes'],
    entry_points={
        'console_scripts':
            [
                'jsontype = jsontypes.jsontype:run',
            ]
    },
    install_requires=[
        'click',
        'jsonschema',
        'requests',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False
)
