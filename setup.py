from setuptools import setup, find_packages

tests_require = [
    'pytest',
    'pytest-mock',
]

setup(name='ferry',
      version='0.3.0',
      description='Ferry',
      long_description='Download files from a cloud storage bucket, run a job on them and upload the results back',
      classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Operating System :: Unix',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: System :: Archiving :: Mirroring',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3'
      ],
      keywords='cloud storage job runner',
      license='MIT',
      packages=['ferry']+['.'.join(('ferry', package)) for package in find_packages('ferry')],
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.7',
      tests_require=tests_require,
      install_requires=[
        'click>=7.0',
        'PyYAML>=5.1',
        'requests>=2.21',
        'schematics>=2.1',
        'minio>=7.0',
        'urllib3>=1.24',
        'google-cloud-storage>=2.0',
        'google-cloud-core>=1.6',
        'google-api-core>=1.31',
        'google-auth>=1.21',
      ],
      extras_require={
          'tests': tests_require,
      },
      entry_points={
          'console_scripts': [
              'ferry=ferry.manage:run',
          ]
      }
)
