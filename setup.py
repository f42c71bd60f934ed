from setuptools import setup, find_packages

readme_file = 'README'
version = __import__('mcboost').get_version()

setup(name='mcboost',
      version = version,
      description='Multi-class boosting of weak classifiers into a weighted vote.',
      long_description=open(readme_file).read(),
      zip_safe=False,
      license = "",
      packages = find_packages(exclude=['tests', 'tests.*']),
      package_data = {'mcboost.demo': ['configurations.cfg']},
      install_requires = [
        'numpy',
        'numexpr',
        'h5py',
        'matplotlib',
        'ujson',
      ],
      extras_require = {
        'test': ['pytest'],
      },
      entry_points = {
        'console_scripts': [
            'mcboost-run = mcboost.run:main',
            'mcboost-plot = mcboost.plot:main',
        ],
      },
      classifiers=['Development Status :: 4 - Beta',
                   'Environment :: Console',
                   'Intended Audience :: Information Technology',
                   'Natural Language :: English',
                   'Operating System :: OS Independent',
                   'Programming Language :: Python :: 3',
                   'Topic :: Scientific/Engineering :: Artificial Intelligence',
                   ],
      )
