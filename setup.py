from setuptools import setup

packages = [
    'numpy',
    'scipy',
    'PyWavelets',
]
#
setup(name='daubscale',
      version='0.1.0',
      description='Interior and boundary Daubechies scaling functions at dyadic rationals',
      url='',
      license='custom ',
      packages=['daubscale', 'daubscale.helpers'],
	    zip_safe=False,
      install_requires=packages,
      extras_require={'test': ['pytest']})
