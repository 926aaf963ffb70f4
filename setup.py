from setuptools import setup, find_packages
import os

version = '0.1'


def readme():
    dirname = os.path.dirname(os.path.abspath(__file__))
    filename = os.path.join(dirname, "README.txt")
    with open(filename) as f:
        return f.read()

setup(name='rdfgraph',
      version=version,
      description="Turtle and N-Triples readers feeding a small in-memory node graph",
      long_description=readme(),
      # Get strings from http://pypi.python.org/pypi?%3Aaction=list_classifiers
      classifiers=[],
      keywords='rdf turtle ntriples graph',
      url='',
      license='BSD',
      packages=find_packages(exclude=['ez_setup', 'examples', 'tests']),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.6',
      install_requires=[
          'requests',
          'rdflib'
      ],
      extras_require={
          'test': ['pytest'],
      },
      )
